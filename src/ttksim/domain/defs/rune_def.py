"""Rune definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RuneDef:
    id: str
    key: str
    name: str
    tree: str = ""
    short_desc: str = ""
    long_desc: str = ""
    icon: str = ""
