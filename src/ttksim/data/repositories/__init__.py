"""Repository exports."""

from dataclasses import dataclass, field
from pathlib import Path

from .champions_repo import ChampionsRepository
from .items_repo import ItemsRepository
from .runes_repo import RunesRepository


@dataclass(slots=True)
class GameData:
    """Caller-owned handle bundling every definition repository."""

    champions: ChampionsRepository = field(default_factory=ChampionsRepository)
    items: ItemsRepository = field(default_factory=ItemsRepository)
    runes: RunesRepository = field(default_factory=RunesRepository)

    @classmethod
    def from_path(cls, base_path: Path | str | None = None) -> "GameData":
        return cls(
            champions=ChampionsRepository(base_path=base_path),
            items=ItemsRepository(base_path=base_path),
            runes=RunesRepository(base_path=base_path),
        )


__all__ = [
    "ChampionsRepository",
    "GameData",
    "ItemsRepository",
    "RunesRepository",
]
