"""
Conflict Matrix: the pairwise "must not be grouped together" relation shared by
every level of the assignment search.

The relation is a symmetric ``n × n`` boolean numpy array. Its diagonal is
never consulted and never written. All mutations come in matched add/remove
pairs so that a backtracking search can restore the exact entry state; the
context managers below guarantee the remove half also runs on exceptional
exits (deadline expiry, verification errors raised by callers).
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from grouprounds.exceptions import MalformedConflictError


class ConflictMatrix:
    """
    Mutable symmetric conflict relation over items ``0..n-1``.

    Usage:
        conflicts = ConflictMatrix.empty(4)
        with conflicts.committed([0, 1]):
            assert conflicts.conflicting(0, 1)
        assert not conflicts.conflicting(0, 1)
    """

    __slots__ = ("matrix",)

    def __init__(self, matrix: np.ndarray):
        # Stored as given (no copy) so a caller-owned buffer is mutated and restored in place
        self.matrix: np.ndarray = matrix

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, n: int) -> "ConflictMatrix":
        """Relation with no forbidden pairs."""
        return cls(np.zeros((n, n), dtype=bool))

    @classmethod
    def diagonal(cls, n: int) -> "ConflictMatrix":
        """Relation with only the (irrelevant) diagonal set."""
        return cls(np.eye(n, dtype=bool))

    @classmethod
    def from_array(cls, array: Sequence[Sequence[bool]] | np.ndarray) -> "ConflictMatrix":
        """
        Wrap an existing array. Boolean numpy arrays are wrapped without copying;
        anything else is converted to a new boolean array.

        Raises:
            MalformedConflictError: If nested rows have unequal lengths
        """
        if isinstance(array, np.ndarray) and array.dtype == np.bool_:
            return cls(array)
        try:
            return cls(np.asarray(array, dtype=bool))
        except ValueError as e:
            # Rows of unequal length cannot form a square relation
            raise MalformedConflictError(
                f"Conflict relation must be a rectangular array: {e}"
            ) from e

    @classmethod
    def from_pairs(cls, n: int, pairs: Iterable[Tuple[int, int]]) -> "ConflictMatrix":
        """Relation with the given unordered pairs pre-forbidden."""
        conflicts = cls.empty(n)
        for i, j in pairs:
            if i == j:
                continue
            conflicts.matrix[i, j] = True
            conflicts.matrix[j, i] = True
        return conflicts

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        return int(self.matrix.shape[0])

    def __len__(self) -> int:
        return self.n

    def conflicting(self, i: int, j: int) -> bool:
        return bool(self.matrix[i, j])

    def conflicts_with_any(self, item: int, others: Sequence[int]) -> bool:
        """True if ``item`` conflicts with at least one of ``others``."""
        row = self.matrix[item]
        return any(row[other] for other in others)

    def pair_count(self) -> int:
        """Number of unordered off-diagonal conflicting pairs."""
        off_diagonal = int(np.count_nonzero(self.matrix)) - int(
            np.count_nonzero(np.diagonal(self.matrix))
        )
        return off_diagonal // 2

    def snapshot(self) -> np.ndarray:
        return self.matrix.copy()

    def validate(self) -> None:
        """
        Check that the relation is a square, symmetric, two-dimensional matrix.

        Raises:
            MalformedConflictError: If any of the shape or symmetry checks fail
        """
        if self.matrix.ndim != 2:
            raise MalformedConflictError(
                f"Conflict relation must be two-dimensional, got {self.matrix.ndim} dimension(s)"
            )
        rows, cols = self.matrix.shape
        if rows != cols:
            raise MalformedConflictError(
                f"Conflict relation must be square, got shape {rows}×{cols}"
            )
        if not np.array_equal(self.matrix, self.matrix.T):
            asymmetric = np.argwhere(self.matrix != self.matrix.T)
            i, j = (int(x) for x in asymmetric[0])
            raise MalformedConflictError(
                f"Conflict relation must be symmetric: conflict({i}, {j}) != conflict({j}, {i})"
            )

    # ------------------------------------------------------------------
    # Mutations (always used in matched add/remove pairs, LIFO)
    # ------------------------------------------------------------------

    def add_pairwise(self, items: Sequence[int]) -> None:
        self._set_pairwise(items, True)

    def remove_pairwise(self, items: Sequence[int]) -> None:
        self._set_pairwise(items, False)

    def add_one(self, item: int, others: Iterable[int]) -> None:
        self._set_one(item, others, True)

    def remove_one(self, item: int, others: Iterable[int]) -> None:
        self._set_one(item, others, False)

    def _set_pairwise(self, items: Sequence[int], value: bool) -> None:
        members: List[int] = list(items)
        for pos, i in enumerate(members):
            for j in members[pos + 1 :]:
                self.matrix[i, j] = value
                self.matrix[j, i] = value

    def _set_one(self, item: int, others: Iterable[int], value: bool) -> None:
        for other in others:
            if other == item:
                continue
            self.matrix[item, other] = value
            self.matrix[other, item] = value

    @contextmanager
    def committed(self, items: Sequence[int]) -> Iterator[None]:
        """Forbid every pair within ``items`` for the duration of the block."""
        self.add_pairwise(items)
        try:
            yield
        finally:
            self.remove_pairwise(items)

    @contextmanager
    def committed_groups(self, groups: Sequence[Sequence[int]]) -> Iterator[None]:
        """Forbid the internal pairs of every group (one whole round) for the block."""
        for group in groups:
            self.add_pairwise(group)
        try:
            yield
        finally:
            for group in reversed(groups):
                self.remove_pairwise(group)

    @contextmanager
    def speculative(self, item: int, others: Sequence[int]) -> Iterator[None]:
        """Forbid ``item`` against each of ``others`` for the duration of the block."""
        members = list(others)
        self.add_one(item, members)
        try:
            yield
        finally:
            self.remove_one(item, members)

    def __repr__(self) -> str:
        return f"ConflictMatrix(n={self.n}, pairs={self.pair_count()})"
