"""
Probability that a skill roll meets a difficulty.

estimate() answers by Monte Carlo sampling, which is what the table
generator uses. exact() answers by weighing every possible roll, which is
slower to set up but has no sampling error, so it is used to check the
sampler and for the viewer's exact mode.
"""

from __future__ import annotations

from collections import Counter
from itertools import islice
from random import Random

from d6pool.dice import add_bonuses, bonuses, outcome, pool_size
from d6pool.pools import pool_multisets, random_pools
from d6pool.records import Estimate


def estimate(skill: int, difficulty: float, attempts: int, rng: Random) -> Estimate:
    """Sample `attempts` rolls of `skill` and count those reaching `difficulty`."""
    if attempts < 1:
        raise ValueError(f"attempts must be positive, got {attempts}")

    wins = 0
    for dice in islice(random_pools(pool_size(skill), rng), attempts):
        if outcome(add_bonuses(dice, skill)) >= difficulty:
            wins += 1
    return Estimate(skill=skill, difficulty=difficulty, wins=wins, attempts=attempts)


def outcome_distribution(skill: int) -> Counter[float]:
    """Map each possible outcome of `skill` to how many of the 6 ** n
    ordered rolls produce it.

    Bonuses depend on position, so the high-bonus prefix and the
    low-bonus suffix are enumerated as separate multisets and their
    weights multiplied.
    """
    amount = pool_size(skill)
    bonused_count, high_bonus, low_bonus = bonuses(skill)
    suffixes = list(pool_multisets(amount - bonused_count))

    dist: Counter[float] = Counter()
    for high, high_weight in pool_multisets(bonused_count):
        for low, low_weight in suffixes:
            bonused = [d + high_bonus for d in high] + [d + low_bonus for d in low]
            dist[outcome(bonused)] += high_weight * low_weight
    return dist


def wins_in(dist: Counter[float], difficulty: float) -> int:
    """How many weighted rolls in `dist` reach `difficulty`."""
    return sum(weight for value, weight in dist.items() if value >= difficulty)


def exact_estimate(skill: int, difficulty: float, dist: Counter[float]) -> Estimate:
    """Estimate for `difficulty` read off an already computed distribution
    of `skill`."""
    return Estimate(
        skill=skill, difficulty=difficulty,
        wins=wins_in(dist, difficulty), attempts=sum(dist.values()),
    )


def exact(skill: int, difficulty: float) -> Estimate:
    """The exact chance of `skill` reaching `difficulty`, as an Estimate
    over all 6 ** n rolls."""
    return exact_estimate(skill, difficulty, outcome_distribution(skill))
