import json
from pathlib import Path

from ttksim.presentation.cli import config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    loaded = config.load_config(tmp_path / "missing.json")

    assert loaded == config.default_config()


def test_save_and_load_config(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config.save_config({"max_simulation_seconds": 90, "seed": 7, "log_level": "debug"}, path)

    loaded = config.load_config(path)

    assert loaded == {"max_simulation_seconds": 90.0, "seed": 7, "log_level": "DEBUG"}
    assert json.loads(path.read_text(encoding="utf-8"))["seed"] == 7


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"max_simulation_seconds": -5, "seed": True, "log_level": "LOUD", "extra": 1}),
        encoding="utf-8",
    )

    assert config.load_config(path) == config.default_config()


def test_unreadable_config_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert config.load_config(path) == config.default_config()

    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert config.load_config(path) == config.default_config()


def test_default_config_path_uses_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.os, "name", "posix")
    monkeypatch.setattr(config.Path, "home", classmethod(lambda cls: tmp_path))

    assert config.get_default_config_path() == tmp_path / ".config" / "ttksim" / "config.json"
