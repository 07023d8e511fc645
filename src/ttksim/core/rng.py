"""Deterministic random sources for critical-strike rolls."""
from __future__ import annotations

from random import Random
from typing import Iterable, Protocol


class RandomSource(Protocol):
    """Anything that can answer a Bernoulli trial."""

    def chance(self, probability: float) -> bool:
        ...


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._random.random() < probability


class ScriptedRolls:
    """Replays a caller-supplied sequence of pre-determined outcomes."""

    def __init__(self, outcomes: Iterable[bool]) -> None:
        self._outcomes = list(outcomes)
        self._index = 0

    @property
    def consumed(self) -> int:
        return self._index

    def chance(self, probability: float) -> bool:
        if self._index >= len(self._outcomes):
            raise ValueError("Scripted roll sequence exhausted.")
        outcome = self._outcomes[self._index]
        self._index += 1
        return bool(outcome)
