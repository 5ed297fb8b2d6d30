"""Streams of dice pools: random samples and exhaustive enumerations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from itertools import combinations_with_replacement, product
from math import factorial, prod
from random import Random

from d6pool.dice import roll
from d6pool.types import Dice, WeightedPool

FACES = range(1, 7)


def random_pools(amount: int, rng: Random) -> Iterator[Dice]:
    """Yield fresh random pools of `amount` dice forever."""
    while True:
        yield roll(amount, rng)


def all_pools(amount: int) -> Iterator[Dice]:
    """Yield every ordered roll of `amount` dice, 6 ** amount in total."""
    for faces in product(FACES, repeat=amount):
        yield list(faces)


def pool_multisets(amount: int) -> Iterator[WeightedPool]:
    """Yield every distinct multiset of `amount` faces with its weight.

    The weight is the number of ordered rolls that sort to the multiset,
    so the weights always sum to 6 ** amount. This lets exact tallies
    skip the duplicate orderings all_pools() would produce.
    """
    for faces in combinations_with_replacement(FACES, amount):
        counts = Counter(faces).values()
        yield faces, factorial(amount) // prod(factorial(k) for k in counts)
