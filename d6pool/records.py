"""Structured results for the d6 pool simulator.

These dataclasses capture single rolls, probability estimates and whole
probability tables, so the same results can be rendered as terminal text,
written as CSV, or shown in the Streamlit viewer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PoolRoll:
    """Full trace of one skill roll."""

    skill: int
    """The skill the pool was rolled for."""

    dice: list[int]
    """Raw faces in roll order, before bonuses."""

    bonused: list[int]
    """Faces after the high/low skill bonuses, same order as dice."""

    stages: list[list[int]]
    """Sorted successes before and after each collapse pass.  Empty when
    the roll had no successes."""

    outcome: float
    """Final value compared against difficulty."""


@dataclass
class Estimate:
    """How often a skill met a difficulty."""

    skill: int
    difficulty: float
    wins: int
    """Rolls whose outcome was at least the difficulty."""

    attempts: int
    """Rolls sampled, or 6 ** dice for an exact estimate."""

    @property
    def probability(self) -> float:
        return self.wins / self.attempts

    @property
    def percent(self) -> float:
        """Probability as a 0-100 percentage, floored to two decimals."""
        return self.wins * 10000 // self.attempts / 100


@dataclass
class ProbabilityTable:
    """Estimates for every (difficulty, skill) pair of a grid."""

    skills: list[int]
    difficulties: list[float]
    attempts: int
    exact: bool = False
    cells: dict[tuple[float, int], Estimate] = field(default_factory=dict)

    def row(self, difficulty: float) -> list[Estimate]:
        """Estimates for one difficulty, ordered by skill."""
        return [self.cells[difficulty, skill] for skill in self.skills]
