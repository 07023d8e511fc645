"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence

from ttksim.domain.entities import FinalStats
from ttksim.domain.simulation import SimulationResult

_STAT_ROWS: Sequence[tuple[str, str, str]] = (
    ("Health", "hp", "{:.1f}"),
    ("Mana", "mp", "{:.1f}"),
    ("Attack Damage", "attack_damage", "{:.1f}"),
    ("Bonus Attack Damage", "bonus_attack_damage", "{:.1f}"),
    ("Ability Power", "ability_power", "{:.1f}"),
    ("Armor", "armor", "{:.1f}"),
    ("Magic Resist", "magic_resist", "{:.1f}"),
    ("Attack Speed", "attack_speed", "{:.3f}"),
    ("Crit Chance", "crit_chance", "{:.2%}"),
    ("Bonus Crit Damage", "bonus_crit_damage_percent", "{:.2%}"),
    ("Lethality", "lethality", "{:.1f}"),
    ("Armor Pen %", "percent_armor_pen", "{:.2%}"),
    ("Magic Pen", "flat_magic_pen", "{:.1f}"),
    ("Magic Pen %", "percent_magic_pen", "{:.2%}"),
    ("Ability Haste", "ability_haste", "{:.1f}"),
    ("Cooldown Reduction", "cooldown_reduction", "{:.2%}"),
    ("Move Speed", "move_speed", "{:.1f}"),
    ("Health Regen", "health_regen", "{:.3f}"),
    ("Mana Regen", "mana_regen", "{:.3f}"),
)


def render_heading(title: str) -> str:
    """Return a consistent section heading."""
    return f"=== {title} ==="


def render_final_stats(title: str, stats: FinalStats) -> list[str]:
    lines = [render_heading(title), f"Level: {stats.level}"]
    width = max(len(label) for label, _, _ in _STAT_ROWS)
    for label, attr, fmt in _STAT_ROWS:
        lines.append(f"{label.ljust(width)} : {fmt.format(getattr(stats, attr))}")
    return lines


def render_simulation_result(title: str, result: SimulationResult) -> list[str]:
    ttk = "-" if result.time_to_kill is None else f"{result.time_to_kill:.3f}s"
    return [
        render_heading(title),
        f"Outcome       : {result.outcome.value} ({result.remarks})",
        f"Time to kill  : {ttk}",
        f"DPS           : {result.dps:.2f}",
        f"Total damage  : {result.total_damage_dealt:.2f}",
        f"Attacks       : {result.attack_count}",
        f"Target health : {result.target_final_health:.2f} / {result.target_initial_health:.2f}",
        f"Elapsed       : {result.simulation_time_elapsed:.3f}s",
    ]
