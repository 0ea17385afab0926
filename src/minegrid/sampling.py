"""
Sampling helpers for mine placement.
"""
import random
from typing import List

from .errors import InvalidArgument


def sample_indices(n: int, k: int, rng: random.Random) -> List[int]:
    """
    Pick k distinct integers from range(n) uniformly at random.

    Runs a partial Fisher-Yates shuffle over the index list, so every
    draw succeeds and dense requests (k close to n) never stall on
    collisions.

    Args:
        n: Population size.
        k: Number of picks; clamped to [0, n].
        rng: Random source, owned by the caller.

    Returns:
        List of k distinct indices in draw order.
    """
    if n < 0:
        raise InvalidArgument(f"Population size cannot be negative: {n}")
    k = max(0, min(k, n))

    pool = list(range(n))
    for i in range(k):
        j = rng.randrange(i, n)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:k]
