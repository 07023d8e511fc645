"""Service layer exports."""

from .simulation_service import BuildBreakdown, SimulationRequest, SimulationService
from .stat_parsers import parse_item_stats, parse_rune_stats
from .stat_source_service import StatSourceService

__all__ = [
    "BuildBreakdown",
    "SimulationRequest",
    "SimulationService",
    "StatSourceService",
    "parse_item_stats",
    "parse_rune_stats",
]
