"""Shared type aliases for the core and domain layers."""
from typing import Literal

RoundingFamily = Literal["large", "counter", "percent"]

__all__ = ["RoundingFamily"]
