"""Raw per-level growth data for a champion definition."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GrowthStats:
    """Level-1 values and per-level growth rates.

    ``attack_speed_growth_percent`` is expressed in percent (3.5 means 3.5%
    of the level-1 rate per level).
    """

    hp: float
    hp_per_level: float
    mp: float
    mp_per_level: float
    attack_damage: float
    attack_damage_per_level: float
    armor: float
    armor_per_level: float
    magic_resist: float
    magic_resist_per_level: float
    attack_speed: float
    attack_speed_growth_percent: float
    move_speed: float
    attack_range: float
    hp_regen: float = 0.0
    hp_regen_per_level: float = 0.0
    mp_regen: float = 0.0
    mp_regen_per_level: float = 0.0
    crit_chance: float = 0.0
    crit_chance_per_level: float = 0.0
    ability_power: float = 0.0
