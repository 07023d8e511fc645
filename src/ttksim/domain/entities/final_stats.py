"""Fully resolved combat stats."""
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class FinalStats:
    """Base stats combined with aggregated modifiers."""

    level: int
    hp: float
    mp: float
    attack_damage: float
    bonus_attack_damage: float
    ability_power: float
    armor: float
    magic_resist: float
    attack_speed: float
    crit_chance: float
    bonus_crit_damage_percent: float
    lethality: float
    flat_armor_pen: float
    percent_armor_pen: float
    flat_magic_pen: float
    percent_magic_pen: float
    heal_and_shield_power: float
    move_speed: float
    ability_haste: float
    cooldown_reduction: float
    health_regen: float
    mana_regen: float
    attack_range: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
