"""Level scaling of champion base stats."""
from __future__ import annotations

from dataclasses import fields
from numbers import Real

from ttksim.domain.combat_formulas import MAX_LEVEL, MIN_LEVEL
from ttksim.domain.entities import BaseStats, GrowthStats
from ttksim.domain.errors import ValidationError

# Linear stats grow by ``per_level * (level - 1)``. Attack speed grows as a
# percentage of the level-1 rate, and movement speed and range never scale.
LARGE_STAT_DIGITS = 1
RATE_DIGITS = 3
PERCENT_DIGITS = 4


def validate_level(level: object) -> int:
    """Return level if it is an integer in [1, 18], else raise ValidationError."""
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValidationError(f"Level must be an integer, got {level!r}.")
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise ValidationError(
            f"Invalid level {level}. Must be between {MIN_LEVEL} and {MAX_LEVEL}."
        )
    return level


def _linear(base: float, per_level: float, levels_gained: int) -> float:
    return base + per_level * levels_gained


def derive_base_stats(growth: GrowthStats, level: int) -> BaseStats:
    """Compute the base stat snapshot for ``growth`` at ``level``."""
    if not isinstance(growth, GrowthStats):
        raise ValidationError("Growth data is missing or malformed.")
    for growth_field in fields(growth):
        field_name = growth_field.name
        value = getattr(growth, field_name)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"Growth field '{field_name}' must be numeric.")
    level = validate_level(level)
    gained = level - 1

    attack_speed = growth.attack_speed * (
        1 + (growth.attack_speed_growth_percent / 100) * gained
    )
    return BaseStats(
        level=level,
        hp=round(_linear(growth.hp, growth.hp_per_level, gained), LARGE_STAT_DIGITS),
        mp=round(_linear(growth.mp, growth.mp_per_level, gained), LARGE_STAT_DIGITS),
        attack_damage=round(
            _linear(growth.attack_damage, growth.attack_damage_per_level, gained),
            LARGE_STAT_DIGITS,
        ),
        ability_power=round(growth.ability_power, LARGE_STAT_DIGITS),
        armor=round(_linear(growth.armor, growth.armor_per_level, gained), LARGE_STAT_DIGITS),
        magic_resist=round(
            _linear(growth.magic_resist, growth.magic_resist_per_level, gained),
            LARGE_STAT_DIGITS,
        ),
        attack_speed=round(attack_speed, RATE_DIGITS),
        attack_speed_at_level1=round(growth.attack_speed, RATE_DIGITS),
        attack_speed_growth_percent=growth.attack_speed_growth_percent,
        crit_chance=round(
            _linear(growth.crit_chance, growth.crit_chance_per_level, gained), PERCENT_DIGITS
        ),
        move_speed=growth.move_speed,
        health_regen=round(
            _linear(growth.hp_regen, growth.hp_regen_per_level, gained), RATE_DIGITS
        ),
        mana_regen=round(
            _linear(growth.mp_regen, growth.mp_regen_per_level, gained), RATE_DIGITS
        ),
        attack_range=growth.attack_range,
    )
