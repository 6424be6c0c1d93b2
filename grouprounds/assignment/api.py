from typing import Callable, Dict, Iterable, List, Optional, Tuple

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.assignment.config import AssignmentConfig
from grouprounds.assignment.greedy import greedy_assignment
from grouprounds.assignment.solver import make_assignments
from grouprounds.assignment.types import RoundSequence
from grouprounds.logger.debug.error_handling import debug_algorithm_execution


def _greedy_adapter(
    conflicts: ConflictMatrix, min_group_size: int, config: AssignmentConfig
) -> List[RoundSequence]:
    return [greedy_assignment(conflicts, min_group_size, config)]


ALGORITHMS: Dict[
    str, Callable[[ConflictMatrix, int, AssignmentConfig], List[RoundSequence]]
] = {
    "exhaustive": make_assignments,
    "greedy": _greedy_adapter,
}


@debug_algorithm_execution
def call_assignments(
    n: int,
    min_group_size: int,
    algorithm: str = "exhaustive",
    forbidden_pairs: Iterable[Tuple[int, int]] = (),
    config: Optional[AssignmentConfig] = None,
) -> List[RoundSequence]:
    """
    Build a relation for ``n`` items (with optional pre-forbidden pairs) and run
    the chosen algorithm on it.

    Raises:
        KeyError: If ``algorithm`` is not one of ``ALGORITHMS``
    """
    if algorithm not in ALGORITHMS:
        raise KeyError(
            f"Unknown algorithm {algorithm!r}; choose from {sorted(ALGORITHMS)}"
        )
    conflicts = ConflictMatrix.from_pairs(n, forbidden_pairs)
    f = ALGORITHMS[algorithm]
    return f(conflicts, min_group_size, config if config is not None else AssignmentConfig())
