"""Turns item and rune ids into per-source stat modifier maps."""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping

from ttksim.data.errors import DataNotFoundError, DataValidationError
from ttksim.data.repositories import ItemsRepository, RunesRepository
from ttksim.domain.errors import ValidationError
from ttksim.domain.stat_keys import StatKey, StatModifierMap, coerce_modifier_map
from ttksim.services.stat_parsers import parse_item_stats, parse_rune_stats

logger = logging.getLogger(__name__)

# Upstream direct-stat names that map onto the modifier vocabulary.
DIRECT_STAT_ALIASES = {
    "FlatPhysicalDamageMod": "FlatAttackDamageMod",
    "FlatHPPoolMod": "FlatHealthMod",
    "FlatMPPoolMod": "FlatManaMod",
    "FlatSpellBlockMod": "FlatMagicResistMod",
    "FlatMagicDamageMod": "FlatAbilityPowerMod",
    "FlatCritChanceMod": "PercentCritChanceMod",
}

# Upstream direct-stat names the engine does not model.
UNMODELED_DIRECT_STATS = frozenset(
    {
        "PercentLifeStealMod",
        "FlatHPRegenMod",
        "PercentHPRegenMod",
        "FlatMPRegenMod",
        "PercentMPRegenMod",
        "PercentSpellVampMod",
        "FlatEnergyPoolMod",
        "FlatEnergyRegenMod",
    }
)


def normalize_direct_stats(raw: Mapping[str, float]) -> StatModifierMap:
    """Alias upstream stat names and validate the values.

    Unmodelled names are dropped silently; any other unknown name is dropped
    with a warning so the rest of the source still counts.
    """
    renamed: dict[StatKey, float] = {}
    for key, value in raw.items():
        if key in UNMODELED_DIRECT_STATS:
            continue
        try:
            stat_key = StatKey.parse(DIRECT_STAT_ALIASES.get(key, key))
        except ValidationError:
            logger.warning("Dropping unknown direct stat %r.", key)
            continue
        renamed[stat_key] = renamed.get(stat_key, 0.0) + value
    return coerce_modifier_map(renamed)


class StatSourceService:
    """Stat-source provider backed by the item and rune repositories.

    Unknown or malformed sources contribute an empty map instead of failing
    the whole build.
    """

    def __init__(self, items_repo: ItemsRepository, runes_repo: RunesRepository) -> None:
        self._items_repo = items_repo
        self._runes_repo = runes_repo

    def item_modifiers(self, item_id: str) -> StatModifierMap:
        try:
            item = self._items_repo.get(item_id)
        except DataNotFoundError:
            logger.warning("Item '%s' not found; contributing no stats.", item_id)
            return {}
        except DataValidationError as exc:
            logger.warning("Item '%s' is malformed (%s); contributing no stats.", item_id, exc)
            return {}
        parsed = parse_item_stats(item.description)
        try:
            direct = normalize_direct_stats(item.stats)
        except ValidationError as exc:
            logger.warning("Item '%s' has malformed stats (%s); contributing no stats.", item_id, exc)
            return {}
        # Direct stats are canonical when both sources name the same key.
        return {**parsed, **direct}

    def rune_modifiers(self, rune_id: int | str) -> StatModifierMap:
        try:
            rune = self._runes_repo.get(rune_id)
        except DataNotFoundError:
            logger.warning("Rune '%s' not found; contributing no stats.", rune_id)
            return {}
        except DataValidationError as exc:
            logger.warning("Rune '%s' is malformed (%s); contributing no stats.", rune_id, exc)
            return {}
        parsed = parse_rune_stats(rune.short_desc)
        if not parsed:
            parsed = parse_rune_stats(rune.long_desc)
        if not parsed:
            logger.debug("Rune '%s' (%s) is not a stat shard.", rune_id, rune.name)
        return parsed

    def modifiers_for(
        self,
        item_ids: Iterable[str] = (),
        rune_ids: Iterable[int | str] = (),
    ) -> List[StatModifierMap]:
        """Return one modifier map per item and per rune, in input order."""
        sources = [self.item_modifiers(item_id) for item_id in item_ids]
        sources.extend(self.rune_modifiers(rune_id) for rune_id in rune_ids)
        return sources
