"""Simulation target models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TargetStats:
    hp: float
    armor: float
    magic_resist: float


@dataclass(frozen=True, slots=True)
class Target:
    """Immutable target template; call spawn() for a per-run copy."""

    name: str
    stats: TargetStats

    def spawn(self) -> TargetInstance:
        """Create an independent mutable instance at full health."""
        return TargetInstance(
            name=self.name,
            stats=TargetInstanceStats(
                hp=self.stats.hp,
                armor=self.stats.armor,
                magic_resist=self.stats.magic_resist,
            ),
            initial_hp=self.stats.hp,
        )


@dataclass(slots=True)
class TargetInstanceStats:
    hp: float
    armor: float
    magic_resist: float


@dataclass(slots=True)
class TargetInstance:
    """Per-simulation target whose health is the only mutating field."""

    name: str
    stats: TargetInstanceStats
    initial_hp: float

    @property
    def is_dead(self) -> bool:
        return self.stats.hp <= 0

    def take_damage(self, amount: float) -> None:
        """Subtract damage, clamping remaining health at zero."""
        self.stats.hp = max(0.0, self.stats.hp - amount)


STANDARD_TARGET = Target(
    name="Standardized Target Dummy V1",
    stats=TargetStats(hp=10000, armor=100, magic_resist=100),
)
