"""Items repository."""
from __future__ import annotations

from typing import Dict

from ttksim.data.repositories.base import LazyRepositoryBase
from ttksim.domain.defs import ItemDef


class ItemsRepository(LazyRepositoryBase[ItemDef]):
    """Loads item definitions, validating each item when it is looked up."""

    kind = "item"

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, object]:
        return dict(raw)

    def _build_entry(self, def_id: str, payload: object) -> ItemDef:
        context = f"item '{def_id}'"
        item_data = self._require_mapping(payload, context)
        self._assert_exact_fields(
            item_data,
            {"name"},
            context,
            optional_fields={"description", "plaintext", "tags", "gold", "from", "into", "stats"},
        )

        stats_payload = self._require_mapping(item_data.get("stats", {}), f"{context} stats")
        stats = {
            str(key): self._require_number(value, f"{context} stat '{key}'")
            for key, value in stats_payload.items()
        }
        gold = item_data.get("gold")
        if gold is not None:
            gold = int(self._require_number(gold, f"{context} gold"))

        return ItemDef(
            id=def_id,
            name=self._require_str(item_data["name"], f"{context} name"),
            description=self._require_str(item_data.get("description", ""), f"{context} description"),
            plaintext=self._require_str(item_data.get("plaintext", ""), f"{context} plaintext"),
            tags=self._require_str_list(item_data.get("tags", []), f"{context} tags"),
            gold=gold,
            builds_from=self._require_str_list(item_data.get("from", []), f"{context} from"),
            builds_into=self._require_str_list(item_data.get("into", []), f"{context} into"),
            stats=stats,
        )
