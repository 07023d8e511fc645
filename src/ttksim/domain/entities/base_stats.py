"""Level-specific base stat snapshot (pre-modifier)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BaseStats:
    """Represents base stats at a level before item and rune contributions."""

    level: int
    hp: float
    mp: float
    attack_damage: float
    ability_power: float
    armor: float
    magic_resist: float
    attack_speed: float
    attack_speed_at_level1: float
    attack_speed_growth_percent: float
    crit_chance: float
    move_speed: float
    health_regen: float
    mana_regen: float
    attack_range: float
