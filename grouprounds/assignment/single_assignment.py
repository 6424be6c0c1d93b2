from __future__ import annotations
from typing import List, Optional, Sequence, Union

import numpy as np

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.elements.group import Group
from grouprounds.assignment.deadline import Deadline
from grouprounds.assignment.group_sizes import group_sizes
from grouprounds.assignment.potential_groups import potential_groups
from grouprounds.assignment.types import Round
from grouprounds.logger import ga_logger


def single_assignment(
    conflicts: ConflictMatrix,
    sizes: Union[Sequence[int], int],
    deadline: Optional[Deadline] = None,
) -> List[Round]:
    """
    Try all ways to split every item into groups matching the size plan.

    Groups are chosen position by position: position ``p`` draws a group of
    ``sizes[p]`` from the items not yet placed in this round. The only state
    carried between positions is the skip mask; ``conflicts`` is left
    untouched on return.

    Args:
        conflicts: Current conflict relation
        sizes: Ordered group sizes summing to ``conflicts.n``, or a minimum
            group size from which the plan is derived
        deadline: Optional search deadline checked on every group enumeration

    Returns:
        Every round (tuple of groups in plan order). Empty when no partition
        avoids the current conflicts.

    Raises:
        ValueError: If the plan is empty or does not sum to the item count
    """
    n = conflicts.n
    if isinstance(sizes, int):
        plan: List[int] = group_sizes(n, sizes)
    else:
        plan = list(sizes)
    if not plan:
        raise ValueError("Size plan must contain at least one group")
    if sum(plan) != n:
        raise ValueError(f"Size plan {plan} sums to {sum(plan)}, expected {n}")

    skip = np.zeros(n, dtype=bool)
    results: List[Round] = []
    curr: List[Group] = []
    last = len(plan) - 1

    def backtrack() -> None:
        position = len(curr)
        for group in potential_groups(conflicts, plan[position], skip, deadline):
            if position == last:
                results.append(tuple(curr) + (group,))
                continue
            members = list(group.indices)
            skip[members] = True
            curr.append(group)
            try:
                backtrack()
            finally:
                curr.pop()
                skip[members] = False

    backtrack()

    if not ga_logger.disabled:
        ga_logger.debug(f"[single_assignment] plan={plan}, rounds={len(results)}")
    return results
