"""
Dice rolling and resolution primitives for the d6 pool system.

A character with skill S rolls min(S, 10) six-sided dice. Skill above 10
doesn't add dice, it adds flat bonuses instead: each full 10 points of
skill raises the bonus by 1, and the leftover points (S - 10) % 10 decide
how many dice get the larger bonus while the rest get one less.

After bonuses, any die showing 6 or more is a success. Successes of equal
value combine in pairs into a single higher success, repeatedly, until all
successes are distinct. The best success is the result, plus half a point
if the second best is within 1 of it. With no successes at all, the result
is simply the highest die.
"""

from __future__ import annotations

from collections import Counter
from random import Random

from d6pool.records import PoolRoll
from d6pool.types import Bonused, Dice

MAX_DICE = 10
SUCCESS = 6


def d6(rng: Random) -> int:
    """Roll a single six-sided die."""
    return rng.randint(1, 6)


def roll(amount: int, rng: Random) -> Dice:
    """Roll `amount` independent d6s."""
    return [d6(rng) for _ in range(amount)]


def pool_size(skill: int) -> int:
    """Number of dice rolled for a skill. Saturates at 10."""
    return min(skill, MAX_DICE)


def bonuses(skill: int) -> tuple[int, int, int]:
    """Return (bonused_count, high_bonus, low_bonus) for a skill.

    bonused_count is how many of the leading dice receive high_bonus;
    every other die receives low_bonus, which is one less (but never
    below 0). For skill <= 10 bonused_count and low_bonus are 0, so no
    die is changed even though skill 10 has a high_bonus of 1.
    """
    bonused_count = max(0, skill - MAX_DICE) % MAX_DICE
    high_bonus = skill // MAX_DICE
    low_bonus = max(high_bonus, 1) - 1
    return bonused_count, high_bonus, low_bonus


def add_bonuses(dice: Dice, skill: int) -> Bonused:
    """Add the skill bonuses to a rolled pool.

    The split is positional: the first bonused_count dice get the high
    bonus and the remainder get the low bonus, regardless of their faces.
    """
    bonused_count, high_bonus, low_bonus = bonuses(skill)
    high, low = dice[:bonused_count], dice[bonused_count:]
    return [d + high_bonus for d in high] + [d + low_bonus for d in low]


def roll_skill(skill: int, rng: Random) -> Bonused:
    """Roll the full pool for a skill, with bonuses applied."""
    return add_bonuses(roll(pool_size(skill), rng), skill)


def collapse(successes: list[int]) -> list[list[int]]:
    """Repeatedly combine equal successes, returning every stage.

    Each pass replaces a group of k equal values v with the single value
    v + k // 2, so a lone value stays where it is. Passes continue until
    no two values are equal. The first stage is the sorted input and the
    last stage holds only distinct values.
    """
    counts = Counter(successes)
    stages = [sorted(counts.elements())]
    while any(k > 1 for k in counts.values()):
        counts = Counter(v + k // 2 for v, k in counts.items())
        stages.append(sorted(counts.elements()))
    return stages


def resolve(survivors: list[int]) -> float:
    """Turn the distinct collapsed successes into an outcome value.

    Only the two best count: the best alone if it beats the second by
    more than 1, otherwise the best plus a half-point.
    """
    top = sorted(survivors, reverse=True)[:2]
    if len(top) < 2 or top[0] > top[1] + 1:
        return float(top[0])
    return top[0] + 0.5


def outcome(pool: Bonused) -> float:
    """Reduce a bonused pool to its outcome value.

    Raises ValueError for an empty pool, which only happens for skill 0.
    """
    if not pool:
        raise ValueError("cannot resolve an empty dice pool")

    successes = [d for d in pool if d >= SUCCESS]
    if not successes:
        return float(max(pool))
    return resolve(collapse(successes)[-1])


def roll_detailed(skill: int, rng: Random) -> PoolRoll:
    """Roll a skill returning the full trace as a PoolRoll.

    Same logic as roll_skill() followed by outcome(), but keeps the raw
    dice, the bonused dice and every collapse stage for display.
    """
    dice = roll(pool_size(skill), rng)
    bonused = add_bonuses(dice, skill)
    successes = [d for d in bonused if d >= SUCCESS]
    stages = collapse(successes) if successes else []
    return PoolRoll(
        skill=skill, dice=dice, bonused=bonused,
        stages=stages, outcome=outcome(bonused),
    )
