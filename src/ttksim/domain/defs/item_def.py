"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class ItemDef:
    """Item definition; ``stats`` holds the raw direct stat mapping."""

    id: str
    name: str
    description: str = ""
    plaintext: str = ""
    tags: tuple[str, ...] = ()
    gold: int | None = None
    builds_from: tuple[str, ...] = ()
    builds_into: tuple[str, ...] = ()
    stats: Dict[str, float] = field(default_factory=dict)
