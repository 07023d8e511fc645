"""Closed vocabulary of stat-modifier keys."""
from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Dict, Mapping

from .errors import ValidationError


class StatKey(str, Enum):
    """Every modifier key a stat source may contribute."""

    FLAT_HEALTH = "FlatHealthMod"
    PERCENT_HEALTH = "PercentHealthMod"
    FLAT_MANA = "FlatManaMod"
    PERCENT_MANA = "PercentManaMod"
    FLAT_ATTACK_DAMAGE = "FlatAttackDamageMod"
    PERCENT_ATTACK_DAMAGE = "PercentAttackDamageMod"
    FLAT_ABILITY_POWER = "FlatAbilityPowerMod"
    PERCENT_ABILITY_POWER = "PercentAbilityPowerMod"
    FLAT_ARMOR = "FlatArmorMod"
    PERCENT_ARMOR = "PercentArmorMod"
    FLAT_MAGIC_RESIST = "FlatMagicResistMod"
    PERCENT_MAGIC_RESIST = "PercentMagicResistMod"
    PERCENT_ATTACK_SPEED = "PercentAttackSpeedMod"
    PERCENT_CRIT_CHANCE = "PercentCritChanceMod"
    PERCENT_CRIT_DAMAGE = "PercentCritDamageMod"
    FLAT_MOVEMENT_SPEED = "FlatMovementSpeedMod"
    PERCENT_MOVEMENT_SPEED = "PercentMovementSpeedMod"
    FLAT_ABILITY_HASTE = "FlatAbilityHasteMod"
    FLAT_LETHALITY = "FlatLethalityMod"
    FLAT_ARMOR_PENETRATION = "FlatArmorPenetrationMod"
    FLAT_MAGIC_PENETRATION = "FlatMagicPenetrationMod"
    PERCENT_ARMOR_PENETRATION = "PercentArmorPenetrationMod"
    PERCENT_MAGIC_PENETRATION = "PercentMagicPenetrationMod"
    PERCENT_HEAL_AND_SHIELD_POWER = "PercentHealAndShieldPowerMod"
    PERCENT_BASE_HEALTH_REGEN = "PercentBaseHealthRegenMod"
    PERCENT_BASE_MANA_REGEN = "PercentBaseManaRegenMod"
    ADAPTIVE_FORCE = "AdaptiveForce"

    @classmethod
    def parse(cls, name: str | StatKey) -> StatKey:
        """Return the key for a wire name, raising ValidationError if unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError as exc:
            raise ValidationError(f"Unknown stat modifier key '{name}'.") from exc


StatModifierMap = Dict[StatKey, float]


def coerce_modifier_map(raw: Mapping[object, object]) -> StatModifierMap:
    """Validate a raw key/number mapping into a StatModifierMap.

    Contributions to the same key (e.g. an enum member and its wire name)
    are summed.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Stat modifier map must be a mapping.")
    modifiers: StatModifierMap = {}
    for raw_key, raw_value in raw.items():
        if not isinstance(raw_key, str):
            raise ValidationError(f"Stat modifier key {raw_key!r} must be a string.")
        key = StatKey.parse(raw_key)
        if isinstance(raw_value, bool) or not isinstance(raw_value, Real):
            raise ValidationError(f"Stat modifier '{key.value}' must be numeric.")
        modifiers[key] = modifiers.get(key, 0.0) + float(raw_value)
    return modifiers
