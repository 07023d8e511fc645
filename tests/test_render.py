from ttksim.domain.entities import STANDARD_TARGET
from ttksim.core.rng import RNG
from ttksim.domain.simulation import run_simulation
from ttksim.presentation.cli.render import (
    render_final_stats,
    render_heading,
    render_simulation_result,
)
from tests.helpers.stat_builders import make_final


def test_render_heading() -> None:
    assert render_heading("Garen") == "=== Garen ==="


def test_render_final_stats_lists_core_stats() -> None:
    lines = render_final_stats("Garen stats", make_final(level=3, attack_damage=78.5))

    assert lines[0] == "=== Garen stats ==="
    assert any(line.startswith("Level") and "3" in line for line in lines)
    assert any("Attack Damage" in line and "78.5" in line for line in lines)


def test_render_simulation_result_includes_outcome_and_remarks() -> None:
    result = run_simulation(make_final(attack_damage=60), STANDARD_TARGET, 1, 5.0, RNG(0))

    text = "\n".join(render_simulation_result("Test", result))

    assert "TimeLimitReached" in text
    assert "Max simulation time reached." in text
    assert "Time to kill" in text
    assert "Attacks" in text
