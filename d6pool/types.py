"""
Type aliases for the d6 pool simulator.

These aren't used for runtime checking. They make signatures say which
kind of list of ints is expected: raw faces straight off the dice, or
values that already carry the skill bonuses.
"""

from typing import TypeAlias

# Raw d6 faces, each in 1-6, in roll order.
Dice: TypeAlias = list[int]

# Faces after skill bonuses. Same length and order as the Dice they came
# from, but no longer capped at 6.
Bonused: TypeAlias = list[int]

# A pool reduced to its multiset: sorted faces with how many of the
# 6 ** n ordered rolls produce them.
WeightedPool: TypeAlias = tuple[tuple[int, ...], int]
