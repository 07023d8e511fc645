"""Aggregation of stat modifiers and resolution into final stats."""
from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Sequence

from ttksim.core.types import RoundingFamily
from ttksim.domain.entities import BaseStats, FinalStats
from ttksim.domain.errors import ValidationError
from ttksim.domain.stat_keys import StatKey, coerce_modifier_map

logger = logging.getLogger(__name__)

MAX_ATTACK_SPEED = 2.5
MAX_CRIT_CHANCE = 1.0

_ROUNDING_DIGITS: Dict[RoundingFamily, int] = {"large": 1, "counter": 3, "percent": 4}

_FIELD_FAMILIES: Dict[str, RoundingFamily] = {
    "hp": "large",
    "mp": "large",
    "attack_damage": "large",
    "bonus_attack_damage": "large",
    "ability_power": "large",
    "armor": "large",
    "magic_resist": "large",
    "move_speed": "large",
    "ability_haste": "large",
    "lethality": "large",
    "flat_armor_pen": "large",
    "flat_magic_pen": "large",
    "attack_range": "large",
    "attack_speed": "counter",
    "health_regen": "counter",
    "mana_regen": "counter",
    "crit_chance": "percent",
    "bonus_crit_damage_percent": "percent",
    "percent_armor_pen": "percent",
    "percent_magic_pen": "percent",
    "heal_and_shield_power": "percent",
    "cooldown_reduction": "percent",
}


@dataclass(frozen=True, slots=True)
class AggregatedModifiers(MappingABC):
    """Keyed sum of every source's modifiers.

    Absent keys read as zero. Adaptive force is kept unresolved here and is
    routed to attack damage or ability power by ``resolve``.
    """

    totals: Mapping[StatKey, float] = field(default_factory=dict)

    def __getitem__(self, key: StatKey) -> float:
        return self.totals[key]

    def __iter__(self) -> Iterator[StatKey]:
        return iter(self.totals)

    def __len__(self) -> int:
        return len(self.totals)

    def get(self, key: StatKey, default: float = 0.0) -> float:
        return self.totals.get(key, default)

    @property
    def adaptive_force(self) -> float:
        return self.get(StatKey.ADAPTIVE_FORCE)


def aggregate(
    source_modifier_maps: Sequence[Mapping[StatKey, float] | None],
) -> AggregatedModifiers:
    """Sum modifier maps from every source.

    A source that is None or malformed contributes nothing; the rest of the
    aggregation proceeds. Previously aggregated results may be passed back in
    as sources.
    """
    if isinstance(source_modifier_maps, (str, bytes, MappingABC)) or not isinstance(
        source_modifier_maps, Sequence
    ):
        raise ValidationError("Modifier sources must be a sequence of modifier maps.")

    totals: Dict[StatKey, float] = {}
    for index, source in enumerate(source_modifier_maps):
        if source is None:
            continue
        try:
            modifiers = coerce_modifier_map(source)
        except ValidationError as exc:
            logger.warning("Ignoring malformed modifier source #%d: %s", index, exc)
            continue
        for key, value in modifiers.items():
            totals[key] = totals.get(key, 0.0) + value
    return AggregatedModifiers(totals=totals)


def _route_adaptive_force(base: BaseStats) -> StatKey:
    # Routing looks only at the champion's innate stats, never at modifiers
    # from the same pass. Ties go to attack damage.
    if base.attack_damage >= base.ability_power:
        return StatKey.FLAT_ATTACK_DAMAGE
    return StatKey.FLAT_ABILITY_POWER


def _scaled(base: float, flat: float, percent: float) -> float:
    return (base + flat) * (1 + percent)


def _round_final(values: Dict[str, float]) -> Dict[str, float]:
    rounded: Dict[str, float] = {}
    for name, value in values.items():
        family = _FIELD_FAMILIES.get(name)
        rounded[name] = value if family is None else round(value, _ROUNDING_DIGITS[family])
    return rounded


def _resolve_attack_speed(base: BaseStats, percent_bonus: float) -> float:
    level1_rate = base.attack_speed_at_level1
    if level1_rate <= 0:
        return 0.0
    level_factor = (base.attack_speed / level1_rate) - 1
    attack_speed = level1_rate * (1 + level_factor + percent_bonus)
    return max(0.0, min(MAX_ATTACK_SPEED, attack_speed))


def resolve(base: BaseStats, aggregated: Mapping[StatKey, float]) -> FinalStats:
    """Combine base stats and aggregated modifiers into FinalStats.

    Rounding happens once, after every stat family has been computed.
    """
    if not isinstance(base, BaseStats):
        raise ValidationError("Base stats are missing or malformed.")
    if not isinstance(aggregated, AggregatedModifiers):
        # A single caller-supplied map must be well formed; only sources
        # inside aggregate() may degrade.
        aggregated = AggregatedModifiers(totals=coerce_modifier_map(aggregated))

    accumulators: Dict[StatKey, float] = dict(aggregated.totals)
    adaptive_force = accumulators.pop(StatKey.ADAPTIVE_FORCE, 0.0)
    if adaptive_force > 0:
        routed_key = _route_adaptive_force(base)
        accumulators[routed_key] = accumulators.get(routed_key, 0.0) + adaptive_force
        logger.debug("Adaptive force %.1f routed to %s", adaptive_force, routed_key.value)

    def mod(key: StatKey) -> float:
        return accumulators.get(key, 0.0)

    attack_damage = _scaled(
        base.attack_damage, mod(StatKey.FLAT_ATTACK_DAMAGE), mod(StatKey.PERCENT_ATTACK_DAMAGE)
    )
    ability_haste = mod(StatKey.FLAT_ABILITY_HASTE)
    raw = {
        "hp": _scaled(base.hp, mod(StatKey.FLAT_HEALTH), mod(StatKey.PERCENT_HEALTH)),
        "mp": _scaled(base.mp, mod(StatKey.FLAT_MANA), mod(StatKey.PERCENT_MANA)),
        "attack_damage": attack_damage,
        "bonus_attack_damage": attack_damage - base.attack_damage,
        "ability_power": _scaled(
            base.ability_power,
            mod(StatKey.FLAT_ABILITY_POWER),
            mod(StatKey.PERCENT_ABILITY_POWER),
        ),
        "armor": _scaled(base.armor, mod(StatKey.FLAT_ARMOR), mod(StatKey.PERCENT_ARMOR)),
        "magic_resist": _scaled(
            base.magic_resist,
            mod(StatKey.FLAT_MAGIC_RESIST),
            mod(StatKey.PERCENT_MAGIC_RESIST),
        ),
        "attack_speed": _resolve_attack_speed(base, mod(StatKey.PERCENT_ATTACK_SPEED)),
        "crit_chance": min(MAX_CRIT_CHANCE, base.crit_chance + mod(StatKey.PERCENT_CRIT_CHANCE)),
        "bonus_crit_damage_percent": mod(StatKey.PERCENT_CRIT_DAMAGE),
        "lethality": mod(StatKey.FLAT_LETHALITY),
        "flat_armor_pen": mod(StatKey.FLAT_ARMOR_PENETRATION),
        "percent_armor_pen": mod(StatKey.PERCENT_ARMOR_PENETRATION),
        "flat_magic_pen": mod(StatKey.FLAT_MAGIC_PENETRATION),
        "percent_magic_pen": mod(StatKey.PERCENT_MAGIC_PENETRATION),
        "heal_and_shield_power": mod(StatKey.PERCENT_HEAL_AND_SHIELD_POWER),
        # Percent movement speed stacks additively; no diminishing returns.
        "move_speed": _scaled(
            base.move_speed,
            mod(StatKey.FLAT_MOVEMENT_SPEED),
            mod(StatKey.PERCENT_MOVEMENT_SPEED),
        ),
        "ability_haste": ability_haste,
        "cooldown_reduction": ability_haste / (100 + ability_haste),
        "health_regen": base.health_regen * (1 + mod(StatKey.PERCENT_BASE_HEALTH_REGEN)),
        "mana_regen": base.mana_regen * (1 + mod(StatKey.PERCENT_BASE_MANA_REGEN)),
        "attack_range": base.attack_range,
    }
    return FinalStats(level=base.level, **_round_final(raw))
