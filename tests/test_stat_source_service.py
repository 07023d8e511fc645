import json
import logging
from pathlib import Path

import pytest

from ttksim.data.repositories import GameData, ItemsRepository, RunesRepository
from ttksim.domain.errors import ValidationError
from ttksim.domain.stat_keys import StatKey
from ttksim.services.stat_source_service import StatSourceService, normalize_direct_stats


def _bundled_service() -> StatSourceService:
    game_data = GameData.from_path()
    return StatSourceService(game_data.items, game_data.runes)


def test_item_modifiers_merge_direct_and_described_stats() -> None:
    modifiers = _bundled_service().item_modifiers("3031")

    assert modifiers == pytest.approx(
        {
            StatKey.FLAT_ATTACK_DAMAGE: 65,
            StatKey.PERCENT_CRIT_CHANCE: 0.25,
            StatKey.PERCENT_CRIT_DAMAGE: 0.40,
        }
    )


def test_unmodeled_direct_stats_are_dropped() -> None:
    modifiers = _bundled_service().item_modifiers("3072")

    assert modifiers == {StatKey.FLAT_ATTACK_DAMAGE: 80}


def test_direct_stats_alias_upstream_names() -> None:
    assert _bundled_service().item_modifiers("3089") == pytest.approx(
        {StatKey.FLAT_ABILITY_POWER: 130, StatKey.PERCENT_ABILITY_POWER: 0.35}
    )
    assert _bundled_service().item_modifiers("1018") == pytest.approx(
        {StatKey.PERCENT_CRIT_CHANCE: 0.15}
    )


def test_unknown_item_contributes_nothing(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        modifiers = _bundled_service().item_modifiers("999999")

    assert modifiers == {}
    assert "999999" in caplog.text


def test_unknown_direct_stat_key_is_dropped_alone(tmp_path: Path, caplog) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "items.json",
        {
            "9000": {
                "name": "Strange Relic",
                "description": "+10 Attack Damage",
                "stats": {"FlatBogusMod": 3, "FlatSpellBlockMod": 20},
            }
        },
    )
    _write_json(definitions_dir / "runes.json", [])
    service = StatSourceService(
        ItemsRepository(base_path=definitions_dir),
        RunesRepository(base_path=definitions_dir),
    )

    with caplog.at_level(logging.WARNING):
        modifiers = service.item_modifiers("9000")

    assert modifiers == {StatKey.FLAT_ATTACK_DAMAGE: 10, StatKey.FLAT_MAGIC_RESIST: 20}
    assert "FlatBogusMod" in caplog.text


def test_rune_modifiers_for_shards_and_keystones() -> None:
    service = _bundled_service()

    assert service.rune_modifiers(5008) == {StatKey.ADAPTIVE_FORCE: 9}
    assert service.rune_modifiers("5005") == pytest.approx({StatKey.PERCENT_ATTACK_SPEED: 0.1})
    assert service.rune_modifiers(8112) == {}
    assert service.rune_modifiers(5001) == {}
    assert service.rune_modifiers(424242) == {}


def test_rune_falls_back_to_long_description(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "items.json", {})
    _write_json(
        definitions_dir / "runes.json",
        [
            {
                "name": "Stat Shards",
                "slots": [
                    {
                        "runes": [
                            {
                                "id": 5002,
                                "key": "Armor",
                                "name": "Armor",
                                "shortDesc": "Armor shard",
                                "longDesc": "+6 Armor",
                            }
                        ]
                    }
                ],
            }
        ],
    )
    service = StatSourceService(
        ItemsRepository(base_path=definitions_dir),
        RunesRepository(base_path=definitions_dir),
    )

    assert service.rune_modifiers(5002) == {StatKey.FLAT_ARMOR: 6}


def test_modifiers_for_returns_one_map_per_source() -> None:
    sources = _bundled_service().modifiers_for(["1036", "1042"], [5008])

    assert sources == [
        {StatKey.FLAT_ATTACK_DAMAGE: 10},
        {StatKey.PERCENT_ATTACK_SPEED: pytest.approx(0.1)},
        {StatKey.ADAPTIVE_FORCE: 9},
    ]


def test_normalize_direct_stats_drops_unknown_keys() -> None:
    assert normalize_direct_stats({"FlatPhysicalDamageMod": 10, "PercentLifeStealMod": 0.1}) == {
        StatKey.FLAT_ATTACK_DAMAGE: 10
    }
    assert normalize_direct_stats({"FlatBogusMod": 1, "PercentHPPoolMod": 0.0}) == {}
    with pytest.raises(ValidationError):
        normalize_direct_stats({"FlatArmorMod": "six"})


def test_malformed_item_contributes_nothing_without_breaking_others(tmp_path: Path, caplog) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "items.json",
        {
            "1036": {"name": "Long Sword", "stats": {"FlatPhysicalDamageMod": 10}},
            "9999": {"name": "Broken", "stats": {"FlatArmorMod": "x"}},
        },
    )
    _write_json(definitions_dir / "runes.json", [])
    service = StatSourceService(
        ItemsRepository(base_path=definitions_dir),
        RunesRepository(base_path=definitions_dir),
    )

    with caplog.at_level(logging.WARNING):
        sources = service.modifiers_for(["1036", "9999"])

    assert sources == [{StatKey.FLAT_ATTACK_DAMAGE: 10}, {}]
    assert "9999" in caplog.text


def test_malformed_rune_contributes_nothing_without_breaking_others(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "items.json", {})
    _write_json(
        definitions_dir / "runes.json",
        [
            {
                "name": "Stat Shards",
                "slots": [
                    {
                        "runes": [
                            {"id": 5008, "key": "AdaptiveForce", "name": "Adaptive Force", "shortDesc": "+9 Adaptive Force"},
                            {"id": 5002, "name": "Armor", "shortDesc": "+6 Armor"},
                        ]
                    }
                ],
            }
        ],
    )
    service = StatSourceService(
        ItemsRepository(base_path=definitions_dir),
        RunesRepository(base_path=definitions_dir),
    )

    assert service.modifiers_for([], [5008, 5002]) == [{StatKey.ADAPTIVE_FORCE: 9}, {}]


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir
