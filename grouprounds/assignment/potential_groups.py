from __future__ import annotations
from typing import Collection, List, Optional, Union

import numpy as np

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.elements.group import Group
from grouprounds.assignment.deadline import Deadline
from grouprounds.logger import ga_logger

SkipLike = Union[np.ndarray, Collection[int], None]


def as_skip_mask(skip: SkipLike, n: int) -> np.ndarray:
    """
    Normalize ``skip`` to a boolean mask of length ``n``.

    Accepts ``None`` (nothing skipped), a boolean mask, or a collection of item
    indices.
    """
    if skip is None:
        return np.zeros(n, dtype=bool)
    if isinstance(skip, np.ndarray) and skip.dtype == np.bool_:
        if skip.shape != (n,):
            raise ValueError(f"Skip mask must have shape ({n},), got {skip.shape}")
        return skip
    mask = np.zeros(n, dtype=bool)
    mask[list(skip)] = True
    return mask


def potential_groups(
    conflicts: ConflictMatrix,
    k: int,
    skip: SkipLike = None,
    deadline: Optional[Deadline] = None,
) -> List[Group]:
    """
    Get all possible ways to put ``k`` non-skipped, mutually compatible items together.

    Candidates are grown in increasing index order, so every set is produced
    exactly once. Before descending, the newest member is marked as conflicting
    with the rest of the partial group; the marks are removed on the way back
    up, leaving ``conflicts`` exactly as it was on entry.

    Args:
        conflicts: Current conflict relation (temporarily mutated)
        k: Target group size, at least 1
        skip: Items that are not eligible (already placed in the current round)
        deadline: Optional search deadline checked on entry

    Returns:
        List of groups in lexicographic order of their sorted indices. Empty when
        fewer than ``k`` compatible items remain.
    """
    if k < 1:
        raise ValueError(f"Group size must be at least 1, got {k}")
    if deadline is not None:
        deadline.check("potential_groups")

    n = conflicts.n
    skip_mask = as_skip_mask(skip, n)
    eligible: List[int] = [i for i in range(n) if not skip_mask[i]]
    results: List[Group] = []
    curr: List[int] = []

    def backtrack(last_pos: int) -> None:
        for pos in range(last_pos + 1, len(eligible)):
            # Not enough eligible items left to complete the group
            if len(eligible) - pos < k - len(curr):
                break
            col = eligible[pos]
            if conflicts.conflicts_with_any(col, curr):
                continue
            if len(curr) + 1 == k:
                results.append(Group(curr + [col]))
                continue
            with conflicts.speculative(col, curr):
                curr.append(col)
                try:
                    backtrack(pos)
                finally:
                    curr.pop()

    backtrack(-1)

    if not ga_logger.disabled:
        ga_logger.debug(
            f"[potential_groups] k={k}, eligible={len(eligible)}, found={len(results)}"
        )
    return results
