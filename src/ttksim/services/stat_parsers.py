"""Extract stat modifiers from human-readable item and rune descriptions."""
from __future__ import annotations

import re
from typing import Pattern, Sequence, Tuple

from ttksim.domain.stat_keys import StatKey, StatModifierMap

_TAG_RE = re.compile(r"<[^>]+>")
_NUMBER = r"\+(\d+(?:\.\d+)?)"

# (key, pattern, is_percent). The first match of each pattern counts.
StatPattern = Tuple[StatKey, Pattern[str], bool]


def _flat(key: StatKey, phrase: str) -> StatPattern:
    return key, re.compile(_NUMBER + r"\s+" + phrase, re.IGNORECASE), False


def _percent(key: StatKey, phrase: str) -> StatPattern:
    return key, re.compile(_NUMBER + r"%\s+" + phrase, re.IGNORECASE), True


ITEM_STAT_PATTERNS: Sequence[StatPattern] = (
    _flat(StatKey.FLAT_ATTACK_DAMAGE, r"Attack Damage"),
    _flat(StatKey.FLAT_ABILITY_POWER, r"Ability Power"),
    _flat(StatKey.FLAT_ARMOR, r"Armor(?!\s+Penetration)"),
    _flat(StatKey.FLAT_MAGIC_RESIST, r"Magic Resist(?:ance)?"),
    _flat(StatKey.FLAT_HEALTH, r"Health(?!\s+Regen)"),
    _flat(StatKey.FLAT_MANA, r"Mana(?!\s+Regen)"),
    _flat(StatKey.FLAT_MOVEMENT_SPEED, r"Movement Speed"),
    _flat(StatKey.FLAT_LETHALITY, r"Lethality"),
    _flat(StatKey.FLAT_MAGIC_PENETRATION, r"Magic Penetration"),
    _flat(StatKey.FLAT_ABILITY_HASTE, r"Ability Haste"),
    _percent(StatKey.PERCENT_ATTACK_SPEED, r"Attack Speed"),
    _percent(StatKey.PERCENT_MOVEMENT_SPEED, r"Movement Speed"),
    _percent(StatKey.PERCENT_CRIT_CHANCE, r"Critical Strike Chance"),
    _percent(StatKey.PERCENT_CRIT_DAMAGE, r"Critical Strike Damage"),
    _percent(StatKey.PERCENT_ARMOR_PENETRATION, r"Armor Penetration"),
    _percent(StatKey.PERCENT_MAGIC_PENETRATION, r"Magic Penetration"),
    _percent(StatKey.PERCENT_HEAL_AND_SHIELD_POWER, r"Heal and Shield Power"),
    _percent(StatKey.PERCENT_BASE_HEALTH_REGEN, r"Base Health Regen"),
    _percent(StatKey.PERCENT_BASE_MANA_REGEN, r"Base Mana Regen"),
)

RUNE_STAT_PATTERNS: Sequence[StatPattern] = (
    _flat(StatKey.ADAPTIVE_FORCE, r"Adaptive Force"),
    _flat(StatKey.FLAT_ARMOR, r"Armor(?!\s+Penetration)"),
    _flat(StatKey.FLAT_MAGIC_RESIST, r"Magic Resist(?:ance)?"),
    _flat(StatKey.FLAT_HEALTH, r"Health(?!\s+Regen)"),
    _flat(StatKey.FLAT_ABILITY_HASTE, r"Ability Haste"),
    _percent(StatKey.PERCENT_ATTACK_SPEED, r"Attack Speed"),
)


def strip_markup(description: str) -> str:
    return _TAG_RE.sub(" ", description)


def _parse(description: object, patterns: Sequence[StatPattern]) -> StatModifierMap:
    stats: StatModifierMap = {}
    if not isinstance(description, str) or not description:
        return stats
    text = strip_markup(description)
    for key, pattern, is_percent in patterns:
        match = pattern.search(text)
        if match is None:
            continue
        value = float(match.group(1))
        if is_percent:
            value /= 100
        stats[key] = stats.get(key, 0.0) + value
    return stats


def parse_item_stats(description: object) -> StatModifierMap:
    """Parse "+N Stat" and "+N% Stat" phrases from an item description."""
    return _parse(description, ITEM_STAT_PATTERNS)


def parse_rune_stats(description: object) -> StatModifierMap:
    """Parse stat-shard phrases such as "+9 Adaptive Force" or "+10% Attack Speed"."""
    return _parse(description, RUNE_STAT_PATTERNS)
