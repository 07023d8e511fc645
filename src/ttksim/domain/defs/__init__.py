"""Domain definition exports."""

from .champion_def import ChampionDef
from .item_def import ItemDef
from .rune_def import RuneDef

__all__ = [
    "ChampionDef",
    "ItemDef",
    "RuneDef",
]
