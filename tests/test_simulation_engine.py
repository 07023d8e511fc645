import math

import pytest

from ttksim.core.rng import RNG, ScriptedRolls
from ttksim.domain.entities import STANDARD_TARGET, Target, TargetStats
from ttksim.domain.errors import ValidationError
from ttksim.domain.simulation import (
    SimulationEngine,
    SimulationOutcome,
    run_simulation,
)
from tests.helpers.stat_builders import make_final


def test_standard_dummy_dies_after_one_hundred_attacks() -> None:
    final = make_final(attack_damage=200, attack_speed=1.0)
    result = run_simulation(final, STANDARD_TARGET, 1, 200.0, RNG(1))

    assert result.outcome is SimulationOutcome.TARGET_ELIMINATED
    assert result.attack_count == 100
    assert result.time_to_kill == pytest.approx(99.0)
    assert result.total_damage_dealt == pytest.approx(10000)
    assert result.dps == pytest.approx(10000 / 99.0)
    assert result.target_initial_health == 10000
    assert result.target_final_health == 0
    assert result.remarks == "Target eliminated."


def test_time_to_kill_is_bounded_by_interval() -> None:
    final = make_final(attack_damage=200, attack_speed=1.0)
    result = run_simulation(final, STANDARD_TARGET, 1, 200.0, RNG(1))

    interval = 1.0
    hits_needed = math.ceil(10000 / 100)
    assert (hits_needed - 1) * interval <= result.time_to_kill <= hits_needed * interval


def test_zero_attack_speed_cannot_attack() -> None:
    final = make_final(attack_speed=0)
    result = run_simulation(final, STANDARD_TARGET, 1, 60.0, ScriptedRolls([]))

    assert result.outcome is SimulationOutcome.CANNOT_ATTACK
    assert result.time_to_kill is None
    assert result.dps == 0
    assert result.attack_count == 0
    assert result.total_damage_dealt == 0
    assert result.target_final_health == 10000
    assert result.simulation_time_elapsed == 0
    assert "cannot attack" in result.remarks


def test_time_limit_reached_reports_partial_damage() -> None:
    final = make_final(attack_damage=60, attack_speed=0.625)
    result = run_simulation(final, STANDARD_TARGET, 1, 10.0, RNG(3))

    assert result.outcome is SimulationOutcome.TIME_LIMIT_REACHED
    assert result.time_to_kill is None
    assert result.attack_count == 7
    assert result.total_damage_dealt == pytest.approx(210)
    assert result.target_final_health == pytest.approx(9790)
    assert result.simulation_time_elapsed == pytest.approx(11.2)
    assert result.dps == pytest.approx(210 / 11.2)
    assert result.remarks == "Max simulation time reached."


def test_single_lethal_attack_uses_interval_for_dps() -> None:
    target = Target(name="Weak", stats=TargetStats(hp=20, armor=100, magic_resist=0))
    final = make_final(attack_damage=200, attack_speed=1.0)
    result = run_simulation(final, target, 1, 60.0, RNG(0))

    assert result.outcome is SimulationOutcome.TARGET_ELIMINATED
    assert result.attack_count == 1
    assert result.time_to_kill == 0.0
    assert result.total_damage_dealt == pytest.approx(100)
    assert result.dps == pytest.approx(100)
    assert result.target_final_health == 0


def test_scripted_critical_strikes_apply_bonus_damage() -> None:
    target = Target(name="Bag", stats=TargetStats(hp=1000, armor=0, magic_resist=0))
    final = make_final(attack_damage=100, attack_speed=1.0, crit_chance=0.5, bonus_crit_damage_percent=0.4)
    rolls = ScriptedRolls([True, False, True])
    result = run_simulation(final, target, 1, 2.5, rolls)

    assert result.attack_count == 3
    assert rolls.consumed == 3
    assert result.total_damage_dealt == pytest.approx(215 + 100 + 215)


def test_crit_roll_consumed_even_without_crit_chance() -> None:
    target = Target(name="Bag", stats=TargetStats(hp=1000, armor=0, magic_resist=0))
    rolls = ScriptedRolls([False, False])
    run_simulation(make_final(attack_damage=100, attack_speed=1.0), target, 1, 1.5, rolls)

    assert rolls.consumed == 2


def test_lethality_and_percent_penetration_reduce_armor() -> None:
    target = Target(name="Tank", stats=TargetStats(hp=950, armor=100, magic_resist=0))
    final = make_final(attack_damage=142, attack_speed=1.0, lethality=18, percent_armor_pen=0.4)
    result = run_simulation(final, target, 18, 60.0, RNG(0))

    assert result.attack_count == 10
    assert result.total_damage_dealt == pytest.approx(1000)
    assert result.time_to_kill == pytest.approx(9.0)


def test_penetration_beyond_armor_amplifies_damage() -> None:
    target = Target(name="Bag", stats=TargetStats(hp=1000, armor=100, magic_resist=0))
    final = make_final(attack_damage=30, attack_speed=1.0, flat_armor_pen=150)
    result = run_simulation(final, target, 1, 0.5, RNG(0))

    assert result.attack_count == 1
    assert result.total_damage_dealt == pytest.approx(40)


def test_runs_do_not_share_target_state() -> None:
    final = make_final(attack_damage=200, attack_speed=1.0)
    first = run_simulation(final, STANDARD_TARGET, 1, 10.0, RNG(5))
    second = run_simulation(final, STANDARD_TARGET, 1, 10.0, RNG(5))

    assert first == second
    assert STANDARD_TARGET.stats.hp == 10000


def test_seeded_runs_are_reproducible() -> None:
    final = make_final(attack_damage=150, attack_speed=1.2, crit_chance=0.5)
    first = run_simulation(final, STANDARD_TARGET, 9, 60.0, RNG(42))
    second = run_simulation(final, STANDARD_TARGET, 9, 60.0, RNG(42))

    assert first.total_damage_dealt == second.total_damage_dealt
    assert first.attack_count == second.attack_count


def test_non_positive_budget_raises() -> None:
    engine = SimulationEngine(RNG(0))
    with pytest.raises(ValidationError):
        engine.run(make_final(), STANDARD_TARGET.spawn(), 1, 0)
