"""
Weighted random selection.

Picks one candidate with probability proportional to its weight. Callers
pass their own random.Random so draws can be seeded and replayed.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def weighted_choice(items: Sequence[tuple[T, float]], rng: random.Random) -> T | None:
    """
    Select one candidate from (candidate, weight) pairs.

    Draws a uniform value in [0, total weight] and walks the pairs in order,
    returning the first whose running total reaches the draw. Candidates
    with weight <= 0 are never returned by the walk. If rounding
    leaves the draw above every running total, the last candidate is
    returned.

    Returns:
        The selected candidate, or None if `items` is empty.
    """
    if not items:
        return None

    total = sum(weight for _, weight in items if weight > 0)
    roll = rng.uniform(0.0, total)

    cumulative = 0.0
    for candidate, weight in items:
        if weight <= 0:
            continue
        cumulative += weight
        if roll <= cumulative:
            return candidate

    return items[-1][0]
