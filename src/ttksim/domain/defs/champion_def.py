"""Champion definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from ttksim.domain.entities import GrowthStats


@dataclass(slots=True)
class ChampionDef:
    """Static champion data with its per-level growth table."""

    id: str
    name: str
    growth: GrowthStats
    title: str = ""
    tags: tuple[str, ...] = ()
