"""Pure damage-mitigation and attack-timing formulas."""
from __future__ import annotations

import math

BASE_CRIT_MULTIPLIER = 1.75
MIN_LEVEL = 1
MAX_LEVEL = 18
LETHALITY_BASE_EFFICIENCY = 0.6
LETHALITY_LEVEL_EFFICIENCY = 0.4


def damage_multiplier(resistance: float) -> float:
    """Return the fraction of incoming damage that survives resistance.

    Negative resistance amplifies damage and approaches 2x.
    """
    if resistance >= 0:
        return 100 / (100 + resistance)
    return 2 - 100 / (100 - resistance)


def effective_resistance(
    base_resistance: float,
    percent_penetration: float,
    flat_penetration: float,
) -> float:
    """Apply percent then flat penetration. The result may be negative."""
    return base_resistance * (1 - percent_penetration) - flat_penetration


def critical_damage_multiplier(bonus_crit_damage_fraction: float = 0.0) -> float:
    return BASE_CRIT_MULTIPLIER + bonus_crit_damage_fraction


def attack_interval(final_attack_speed: float) -> float:
    """Seconds between attacks; infinity means the attacker cannot attack."""
    if final_attack_speed <= 0:
        return math.inf
    return 1 / final_attack_speed


def lethality_to_flat_penetration(lethality: float, attacker_level: int) -> float:
    """Convert lethality to flat armor penetration; efficiency reaches 100% at level 18."""
    level = max(MIN_LEVEL, min(MAX_LEVEL, attacker_level))
    return lethality * (LETHALITY_BASE_EFFICIENCY + LETHALITY_LEVEL_EFFICIENCY * level / MAX_LEVEL)
