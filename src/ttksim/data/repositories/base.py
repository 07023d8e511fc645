"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from numbers import Real
from pathlib import Path
from typing import Dict, Generic, TypeVar

from ttksim.data import paths
from ttksim.data.errors import DataNotFoundError, DataValidationError
from ttksim.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories.

    Each instance owns its cache, so separate instances never share state.
    """

    kind = "definition"

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> object:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: object) -> Dict[str, T]:
        """Convert raw JSON into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
        return self._definitions

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        definitions = self._ensure_loaded()
        try:
            return definitions[def_id]
        except KeyError as exc:
            raise DataNotFoundError(f"{self.kind.capitalize()} '{def_id}' not found.") from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._ensure_loaded()
        return [definitions[key] for key in sorted(definitions.keys())]

    def ids(self) -> list[str]:
        return sorted(self._ensure_loaded().keys())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _require_str_list(value: object, context: str) -> tuple[str, ...]:
        if not isinstance(value, list) or not all(isinstance(entry, str) for entry in value):
            raise DataValidationError(f"{context} must be a list of strings.")
        return tuple(value)

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")


class LazyRepositoryBase(RepositoryBase[T]):
    """Repository that validates each entry on first lookup.

    ``_build`` only indexes raw payloads by id; ``_build_entry`` turns one
    payload into a definition. A malformed entry fails its own lookup and
    leaves the rest of the file usable.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        super().__init__(filename, base_path)
        self._entries: Dict[str, T] = {}

    def _build_entry(self, def_id: str, payload: object) -> T:
        raise NotImplementedError

    def get(self, def_id: str) -> T:
        entry = self._entries.get(def_id)
        if entry is None:
            payload = super().get(def_id)
            entry = self._build_entry(def_id, payload)
            self._entries[def_id] = entry
        return entry

    def all(self) -> list[T]:
        """Return all definitions; raises on the first malformed entry."""
        return [self.get(def_id) for def_id in self.ids()]
