"""Helpers for resolving game-data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "TTKSIM_DEFINITIONS_PATH"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing champion, item, and rune JSON files.

    An explicit ``base_path`` wins over the environment override, which wins
    over the bundled ``data/definitions`` directory.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
