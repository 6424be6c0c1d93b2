from typing import List, Optional

from grouprounds.assignment.config import AssignmentConfig
from grouprounds.assignment.deadline import Deadline
from grouprounds.assignment.group_sizes import group_sizes
from grouprounds.assignment.single_assignment import single_assignment
from grouprounds.assignment.types import Round, RoundSequence
from grouprounds.assignment.validation import (
    ConflictLike,
    as_conflict_matrix,
    validate_inputs,
)
from grouprounds.logger import ga_logger


def greedy_assignment(
    conflicts: ConflictLike,
    min_group_size: Optional[int] = None,
    config: Optional[AssignmentConfig] = None,
) -> RoundSequence:
    """
    Build one sequence by always taking the first valid round.

    Much cheaper than the exhaustive search and gives a lower bound on the
    maximum length. The conflict relation is restored before returning.
    """
    config = config if config is not None else AssignmentConfig()
    min_size = min_group_size if min_group_size is not None else config.min_group_size
    matrix = as_conflict_matrix(conflicts)
    validate_inputs(matrix, min_size)

    plan = group_sizes(matrix.n, min_size)
    deadline = Deadline(config.timeout_seconds, config.clock)
    sequence: List[Round] = []
    try:
        while True:
            options = single_assignment(matrix, plan, deadline)
            if not options:
                break
            chosen = options[0]
            for group in chosen:
                matrix.add_pairwise(group)
            sequence.append(chosen)
            if all(len(group) == 1 for group in chosen):
                break
    finally:
        for committed in reversed(sequence):
            for group in reversed(committed):
                matrix.remove_pairwise(group)

    if not ga_logger.disabled:
        ga_logger.info(f"[greedy_assignment] built {len(sequence)} round(s)")
    return sequence
