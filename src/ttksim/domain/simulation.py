"""Fixed-interval auto-attack simulation against a single target."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from ttksim.core.rng import RandomSource
from ttksim.domain import combat_formulas
from ttksim.domain.entities import FinalStats, Target, TargetInstance
from ttksim.domain.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIMULATION_SECONDS = 60.0


class SimulationOutcome(str, Enum):
    TARGET_ELIMINATED = "TargetEliminated"
    TIME_LIMIT_REACHED = "TimeLimitReached"
    CANNOT_ATTACK = "CannotAttack"


_REMARKS = {
    SimulationOutcome.TARGET_ELIMINATED: "Target eliminated.",
    SimulationOutcome.TIME_LIMIT_REACHED: "Max simulation time reached.",
    SimulationOutcome.CANNOT_ATTACK: "Champion cannot attack (zero or invalid attack speed).",
}


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Summary of one simulation run."""

    time_to_kill: float | None
    dps: float
    total_damage_dealt: float
    attack_count: int
    final_stats: FinalStats
    target_initial_health: float
    target_final_health: float
    simulation_time_elapsed: float
    outcome: SimulationOutcome

    @property
    def remarks(self) -> str:
        return _REMARKS[self.outcome]


class SimulationEngine:
    """Runs basic attacks at a fixed interval until the target dies or time runs out."""

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng

    def run(
        self,
        final_stats: FinalStats,
        target: TargetInstance,
        attacker_level: int,
        max_simulation_seconds: float = DEFAULT_MAX_SIMULATION_SECONDS,
    ) -> SimulationResult:
        if max_simulation_seconds <= 0:
            raise ValidationError("Simulation time budget must be positive.")
        initial_health = target.stats.hp
        interval = combat_formulas.attack_interval(final_stats.attack_speed)
        if math.isinf(interval):
            logger.info("Attack speed %.3f cannot attack", final_stats.attack_speed)
            return SimulationResult(
                time_to_kill=None,
                dps=0.0,
                total_damage_dealt=0.0,
                attack_count=0,
                final_stats=final_stats,
                target_initial_health=initial_health,
                target_final_health=target.stats.hp,
                simulation_time_elapsed=0.0,
                outcome=SimulationOutcome.CANNOT_ATTACK,
            )

        # Penetration does not change between attacks.
        flat_armor_pen = final_stats.flat_armor_pen + combat_formulas.lethality_to_flat_penetration(
            final_stats.lethality, attacker_level
        )
        effective_armor = combat_formulas.effective_resistance(
            target.stats.armor, final_stats.percent_armor_pen, flat_armor_pen
        )
        armor_multiplier = combat_formulas.damage_multiplier(effective_armor)
        crit_multiplier = combat_formulas.critical_damage_multiplier(
            final_stats.bonus_crit_damage_percent
        )

        current_time = 0.0
        total_damage = 0.0
        attack_count = 0
        time_to_kill: float | None = None
        while target.stats.hp > 0 and current_time < max_simulation_seconds:
            is_crit = self._rng.chance(final_stats.crit_chance)
            raw_damage = final_stats.attack_damage * (crit_multiplier if is_crit else 1)
            mitigated = raw_damage * armor_multiplier
            target.take_damage(mitigated)
            total_damage += mitigated
            attack_count += 1
            if target.is_dead:
                time_to_kill = current_time
                break
            current_time += interval

        if time_to_kill is not None:
            outcome = SimulationOutcome.TARGET_ELIMINATED
            dps_window = time_to_kill if time_to_kill > 0 else interval
        else:
            outcome = SimulationOutcome.TIME_LIMIT_REACHED
            dps_window = max(current_time, interval)

        logger.debug(
            "Simulation finished: %s after %d attacks (%.3fs)", outcome.value, attack_count, current_time
        )
        return SimulationResult(
            time_to_kill=time_to_kill,
            dps=total_damage / dps_window,
            total_damage_dealt=total_damage,
            attack_count=attack_count,
            final_stats=final_stats,
            target_initial_health=initial_health,
            target_final_health=target.stats.hp,
            simulation_time_elapsed=current_time,
            outcome=outcome,
        )


def run_simulation(
    final_stats: FinalStats,
    target_template: Target,
    attacker_level: int,
    max_simulation_seconds: float,
    rng: RandomSource,
) -> SimulationResult:
    """Simulate against a fresh copy of ``target_template``."""
    return SimulationEngine(rng).run(
        final_stats,
        target_template.spawn(),
        attacker_level,
        max_simulation_seconds,
    )
