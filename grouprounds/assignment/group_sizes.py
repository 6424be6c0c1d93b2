from typing import List

from grouprounds.exceptions import (
    EmptyPopulationError,
    InfeasibleMinimumError,
    InvalidMinimumError,
)


def group_sizes(n: int, min_group_size: int) -> List[int]:
    """
    Compute the per-round size plan for ``n`` items.

    Starts from ``n // min_group_size`` groups of the minimum size and hands out
    the remainder one item at a time, cycling from the first group, so sizes
    never differ by more than one.

    Example:
        >>> group_sizes(7, 2)
        [3, 2, 2]

    Raises:
        EmptyPopulationError: If ``n < 1``
        InvalidMinimumError: If ``min_group_size < 1``
        InfeasibleMinimumError: If ``min_group_size > n``
    """
    if n < 1:
        raise EmptyPopulationError(f"Cannot plan groups for {n} items")
    if min_group_size < 1:
        raise InvalidMinimumError(
            f"Minimum group size must be at least 1, got {min_group_size}"
        )
    InfeasibleMinimumError.check(n, min_group_size)

    sizes = [min_group_size] * (n // min_group_size)
    remaining = n % min_group_size

    # Evenly distribute leftover across the plan
    position = 0
    while remaining:
        sizes[position] += 1
        remaining -= 1
        position = (position + 1) % len(sizes)
    return sizes
