"""Random input generation for building demo and test trees."""

import numpy as np
from typing import List, Optional


def random_array(size: int, low: int = 1, high: int = 100,
                 seed: Optional[int] = None) -> List[int]:
    """
    Draw ``size`` integers uniformly from ``[low, high]``, repeats allowed.

    Args:
        size: Number of values to draw
        low: Smallest possible value (inclusive)
        high: Largest possible value (inclusive)
        seed: Random seed; fresh entropy when None

    Returns:
        Plain Python ints, ready to feed a Tree
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")

    rng = np.random.RandomState(seed) if seed is not None else np.random.RandomState()
    return [int(v) for v in rng.randint(low, high + 1, size=size)]
