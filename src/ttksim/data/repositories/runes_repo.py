"""Runes repository over a list of rune trees."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from ttksim.data.errors import DataValidationError
from ttksim.data.json_loader import load_json
from ttksim.data.repositories.base import LazyRepositoryBase
from ttksim.domain.defs import RuneDef

logger = logging.getLogger(__name__)


class RunesRepository(LazyRepositoryBase[RuneDef]):
    """Flattens trees -> slots -> runes into a lookup keyed by rune id.

    Tree and slot structure is checked when the file loads; each rune's own
    fields are checked when that rune is looked up.
    """

    kind = "rune"

    def __init__(self, base_path=None) -> None:
        super().__init__("runes.json", base_path)

    def _load_raw(self) -> list[object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, list):
            raise DataValidationError(f"Expected a list of rune trees in {file_path}")
        return raw

    def _build(self, raw: list[object]) -> Dict[str, Tuple[str, dict]]:
        runes: Dict[str, Tuple[str, dict]] = {}
        for tree_index, tree_payload in enumerate(raw):
            tree = self._require_mapping(tree_payload, f"rune tree #{tree_index}")
            tree_name = self._require_str(tree.get("name", ""), f"rune tree #{tree_index} name")
            slots = tree.get("slots", [])
            if not isinstance(slots, list):
                raise DataValidationError(f"rune tree '{tree_name}' slots must be a list.")
            for slot_payload in slots:
                slot = self._require_mapping(slot_payload, f"rune tree '{tree_name}' slot")
                slot_runes = slot.get("runes", [])
                if not isinstance(slot_runes, list):
                    raise DataValidationError(f"rune tree '{tree_name}' slot runes must be a list.")
                for rune_payload in slot_runes:
                    raw_id = rune_payload.get("id") if isinstance(rune_payload, dict) else None
                    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, str)):
                        logger.warning("Skipping rune without a usable id in tree '%s'.", tree_name)
                        continue
                    rune_id = str(raw_id)
                    if rune_id in runes:
                        raise DataValidationError(f"Duplicate rune id '{rune_id}'.")
                    runes[rune_id] = (tree_name, rune_payload)
        return runes

    def _build_entry(self, def_id: str, payload: Tuple[str, dict]) -> RuneDef:
        tree_name, rune_data = payload
        context = f"rune '{def_id}'"
        self._assert_exact_fields(
            rune_data,
            {"id", "key", "name"},
            context,
            optional_fields={"icon", "shortDesc", "longDesc"},
        )
        return RuneDef(
            id=def_id,
            key=self._require_str(rune_data["key"], f"{context} key"),
            name=self._require_str(rune_data["name"], f"{context} name"),
            tree=tree_name,
            short_desc=self._require_str(rune_data.get("shortDesc", ""), f"{context} shortDesc"),
            long_desc=self._require_str(rune_data.get("longDesc", ""), f"{context} longDesc"),
            icon=self._require_str(rune_data.get("icon", ""), f"{context} icon"),
        )

    def get(self, def_id: int | str) -> RuneDef:
        return super().get(str(def_id))
