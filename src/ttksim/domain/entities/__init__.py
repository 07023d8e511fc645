"""Runtime entity exports."""

from .base_stats import BaseStats
from .final_stats import FinalStats
from .growth_stats import GrowthStats
from .target import STANDARD_TARGET, Target, TargetInstance, TargetInstanceStats, TargetStats

__all__ = [
    "BaseStats",
    "FinalStats",
    "GrowthStats",
    "STANDARD_TARGET",
    "Target",
    "TargetInstance",
    "TargetInstanceStats",
    "TargetStats",
]
