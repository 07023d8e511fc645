"""Command-line entry point for stat sheets and auto-attack simulations."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ttksim.data.errors import DataError
from ttksim.data.repositories import GameData
from ttksim.domain.errors import ValidationError
from ttksim.services import SimulationRequest, SimulationService

from .config import load_config
from .render import render_final_stats, render_simulation_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttksim",
        description="Resolve champion stats and simulate basic attacks against a target dummy.",
    )
    parser.add_argument("--definitions", type=Path, default=None, help="Directory with champion/item/rune JSON.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.json file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("stats", "Print the resolved stat sheet."),
        ("simulate", "Simulate basic attacks until the target dies or time runs out."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("champion", help="Champion id or name, e.g. Ahri.")
        sub.add_argument("--level", type=int, required=True)
        sub.add_argument("--item", dest="items", action="append", default=[], help="Item id (repeatable).")
        sub.add_argument("--rune", dest="runes", action="append", default=[], help="Rune id (repeatable).")
        if name == "simulate":
            sub.add_argument("--seed", type=int, default=None)
            sub.add_argument("--max-seconds", type=float, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(level=str(config["log_level"]), format="%(levelname)s %(name)s: %(message)s")

    service = SimulationService(GameData.from_path(args.definitions))
    request = SimulationRequest(
        champion_id=args.champion,
        level=args.level,
        item_ids=tuple(args.items),
        rune_ids=tuple(args.runes),
        max_simulation_seconds=_pick(getattr(args, "max_seconds", None), config["max_simulation_seconds"]),
        seed=_pick(getattr(args, "seed", None), config["seed"]),
    )
    try:
        if args.command == "stats":
            breakdown = service.build_final_stats(request)
            lines = render_final_stats(f"{breakdown.champion_id} stats", breakdown.final_stats)
        else:
            result = service.run_auto_attack_simulation(request)
            lines = render_simulation_result(f"{args.champion} vs {request.target.name}", result)
    except (DataError, ValidationError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}")
        return 1
    print("\n".join(lines))
    return 0


def _pick(cli_value, config_value):
    return cli_value if cli_value is not None else config_value
