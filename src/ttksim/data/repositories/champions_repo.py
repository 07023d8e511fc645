"""Champions repository."""
from __future__ import annotations

from typing import Dict

from ttksim.data.errors import DataNotFoundError, DataValidationError
from ttksim.data.repositories.base import RepositoryBase
from ttksim.domain.defs import ChampionDef
from ttksim.domain.entities import GrowthStats

# Upstream stat key -> GrowthStats field.
_REQUIRED_GROWTH_FIELDS = {
    "hp": "hp",
    "hpperlevel": "hp_per_level",
    "mp": "mp",
    "mpperlevel": "mp_per_level",
    "attackdamage": "attack_damage",
    "attackdamageperlevel": "attack_damage_per_level",
    "armor": "armor",
    "armorperlevel": "armor_per_level",
    "spellblock": "magic_resist",
    "spellblockperlevel": "magic_resist_per_level",
    "attackspeed": "attack_speed",
    "attackspeedperlevel": "attack_speed_growth_percent",
    "movespeed": "move_speed",
    "attackrange": "attack_range",
}
_OPTIONAL_GROWTH_FIELDS = {
    "hpregen": "hp_regen",
    "hpregenperlevel": "hp_regen_per_level",
    "mpregen": "mp_regen",
    "mpregenperlevel": "mp_regen_per_level",
    "crit": "crit_chance",
    "critperlevel": "crit_chance_per_level",
    "abilitypower": "ability_power",
}
# Display names whose ids differ from the name.
_NAME_ALIASES = {"wukong": "MonkeyKing"}


class ChampionsRepository(RepositoryBase[ChampionDef]):
    """Loads champion growth data and answers growth lookups by id."""

    kind = "champion"

    def __init__(self, base_path=None) -> None:
        super().__init__("champions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ChampionDef]:
        champions: Dict[str, ChampionDef] = {}
        for raw_id, payload in raw.items():
            context = f"champion '{raw_id}'"
            champion_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                champion_data,
                {"name", "stats"},
                context,
                optional_fields={"title", "tags"},
            )
            name = self._require_str(champion_data["name"], f"{context} name")
            title = self._require_str(champion_data.get("title", ""), f"{context} title")
            tags = self._require_str_list(champion_data.get("tags", []), f"{context} tags")
            growth = self._build_growth(champion_data["stats"], context)
            champions[raw_id] = ChampionDef(
                id=raw_id,
                name=name,
                growth=growth,
                title=title,
                tags=tags,
            )
        return champions

    def _build_growth(self, payload: object, context: str) -> GrowthStats:
        stats = self._require_mapping(payload, f"{context} stats")
        self._assert_exact_fields(
            stats,
            set(_REQUIRED_GROWTH_FIELDS),
            f"{context} stats",
            optional_fields=set(_OPTIONAL_GROWTH_FIELDS),
        )
        values: Dict[str, float] = {}
        for raw_key, field_name in {**_REQUIRED_GROWTH_FIELDS, **_OPTIONAL_GROWTH_FIELDS}.items():
            if raw_key in stats:
                values[field_name] = self._require_number(stats[raw_key], f"{context} {raw_key}")
        if values["attack_speed"] < 0:
            raise DataValidationError(f"{context} attackspeed must not be negative.")
        return GrowthStats(**values)

    def resolve_id(self, champion_id: str) -> str:
        """Map a case-insensitive id or display name onto a defined champion id."""
        definitions = self._ensure_loaded()
        if champion_id in definitions:
            return champion_id
        lowered = champion_id.lower()
        if lowered in _NAME_ALIASES and _NAME_ALIASES[lowered] in definitions:
            return _NAME_ALIASES[lowered]
        for def_id, champion in definitions.items():
            if def_id.lower() == lowered or champion.name.lower() == lowered:
                return def_id
        raise DataNotFoundError(f"Champion '{champion_id}' not found.")

    def get_champion(self, champion_id: str) -> ChampionDef:
        return self.get(self.resolve_id(champion_id))

    def get_growth(self, champion_id: str) -> GrowthStats:
        """Return GrowthStats for a champion, raising DataNotFoundError if unknown."""
        return self.get_champion(champion_id).growth
