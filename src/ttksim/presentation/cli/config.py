"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

_DEFAULT_MAX_SIMULATION_SECONDS = 60.0
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "ttksim"
        return Path.home() / "ttksim"
    return Path.home() / ".config" / "ttksim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, object]:
    return {
        "max_simulation_seconds": _DEFAULT_MAX_SIMULATION_SECONDS,
        "seed": None,
        "log_level": _DEFAULT_LOG_LEVEL,
    }


def _normalize(raw: Dict[str, object]) -> Dict[str, object]:
    config = default_config()
    seconds = raw.get("max_simulation_seconds")
    if not isinstance(seconds, bool) and isinstance(seconds, (int, float)) and seconds > 0:
        config["max_simulation_seconds"] = float(seconds)
    seed = raw.get("seed")
    if not isinstance(seed, bool) and isinstance(seed, int):
        config["seed"] = seed
    level = raw.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        config["log_level"] = level.upper()
    return config


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
