"""End-to-end build resolution and auto-attack simulation."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ttksim.core.rng import RNG, RandomSource
from ttksim.data.repositories import GameData
from ttksim.domain.entities import STANDARD_TARGET, BaseStats, FinalStats, Target
from ttksim.domain.errors import ValidationError
from ttksim.domain.simulation import (
    DEFAULT_MAX_SIMULATION_SECONDS,
    SimulationResult,
    run_simulation,
)
from ttksim.domain.stat_aggregator import AggregatedModifiers, aggregate, resolve
from ttksim.domain.stat_model import derive_base_stats
from ttksim.services.stat_source_service import StatSourceService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulationRequest:
    """A champion build to simulate against a target."""

    champion_id: str
    level: int
    item_ids: tuple[str, ...] = ()
    rune_ids: tuple[int | str, ...] = ()
    max_simulation_seconds: float = DEFAULT_MAX_SIMULATION_SECONDS
    target: Target = STANDARD_TARGET
    seed: int | None = None


@dataclass(frozen=True, slots=True)
class BuildBreakdown:
    champion_id: str
    base_stats: BaseStats
    modifiers: AggregatedModifiers
    final_stats: FinalStats


class SimulationService:
    """Wires champion data, stat sources, and the simulation engine together."""

    def __init__(self, game_data: GameData) -> None:
        self._game_data = game_data
        self._stat_sources = StatSourceService(game_data.items, game_data.runes)

    def build_final_stats(self, request: SimulationRequest) -> BuildBreakdown:
        """Resolve a request's champion, items, and runes into final stats."""
        if not request.champion_id or not request.champion_id.strip():
            raise ValidationError("Champion id is required.")
        champion_id = self._game_data.champions.resolve_id(request.champion_id.strip())
        growth = self._game_data.champions.get_growth(champion_id)
        base_stats = derive_base_stats(growth, request.level)
        sources = self._stat_sources.modifiers_for(request.item_ids, request.rune_ids)
        modifiers = aggregate(sources)
        final_stats = resolve(base_stats, modifiers)
        return BuildBreakdown(
            champion_id=champion_id,
            base_stats=base_stats,
            modifiers=modifiers,
            final_stats=final_stats,
        )

    def run_auto_attack_simulation(
        self,
        request: SimulationRequest,
        rng: RandomSource | None = None,
    ) -> SimulationResult:
        """Simulate basic attacks; ``rng`` defaults to a fresh RNG seeded from the request."""
        if request.max_simulation_seconds <= 0:
            raise ValidationError("Simulation time budget must be positive.")
        breakdown = self.build_final_stats(request)
        result = run_simulation(
            breakdown.final_stats,
            request.target,
            request.level,
            request.max_simulation_seconds,
            rng if rng is not None else RNG(request.seed),
        )
        logger.info(
            "%s L%d vs %s: %s, %d attacks, %.2f dps",
            breakdown.champion_id,
            request.level,
            request.target.name,
            result.outcome.value,
            result.attack_count,
            result.dps,
        )
        return result
