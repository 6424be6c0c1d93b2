from __future__ import annotations
from typing import Sequence, Union

import numpy as np

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.exceptions import (
    EmptyPopulationError,
    InfeasibleMinimumError,
    InvalidMinimumError,
)

ConflictLike = Union[ConflictMatrix, np.ndarray, Sequence[Sequence[bool]]]


def as_conflict_matrix(conflicts: ConflictLike) -> ConflictMatrix:
    """Wrap array-like input; a ConflictMatrix is returned unchanged."""
    if isinstance(conflicts, ConflictMatrix):
        return conflicts
    return ConflictMatrix.from_array(conflicts)


def validate_inputs(conflicts: ConflictMatrix, min_group_size: int) -> None:
    """
    Reject caller input before any search begins.

    Raises:
        EmptyPopulationError: If there are no items
        MalformedConflictError: If the relation is not square and symmetric
        InvalidMinimumError: If ``min_group_size < 1``
        InfeasibleMinimumError: If ``min_group_size`` exceeds the item count
    """
    # An empty list arrives one-dimensional; report it as empty, not malformed
    if conflicts.matrix.size == 0:
        raise EmptyPopulationError("Conflict relation has no items to group")
    conflicts.validate()
    n = conflicts.n
    if min_group_size < 1:
        raise InvalidMinimumError(
            f"Minimum group size must be at least 1, got {min_group_size}"
        )
    InfeasibleMinimumError.check(n, min_group_size)
