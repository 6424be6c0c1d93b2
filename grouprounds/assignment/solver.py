from __future__ import annotations
from typing import List, Optional

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.assignment.canonical import canonicalize_sequences
from grouprounds.assignment.config import AssignmentConfig
from grouprounds.assignment.deadline import Deadline
from grouprounds.assignment.group_sizes import group_sizes
from grouprounds.assignment.registry import SequenceRegistry
from grouprounds.assignment.single_assignment import single_assignment
from grouprounds.assignment.types import Round, RoundSequence
from grouprounds.assignment.validation import (
    ConflictLike,
    as_conflict_matrix,
    validate_inputs,
)
from grouprounds.assignment.verification import verify_result_set
from grouprounds.exceptions import GroupAssignmentError
from grouprounds.logger import ga_logger, format_sequence
from grouprounds.logger.debug.error_handling import log_detailed_error


def _has_pairs(assignment_round: Round) -> bool:
    return any(len(group) > 1 for group in assignment_round)


class AssignmentSolver:
    """
    Stateful solver for the maximum-length round sequence problem.

    Encapsulates input validation, size planning, the depth-first sequence
    search and result post-processing.

    Usage:
        solver = AssignmentSolver(ConflictMatrix.empty(4), min_group_size=2)
        sequences = solver.solve()  # 48 sequences of 3 rounds each
    """

    def __init__(
        self,
        conflicts: ConflictLike,
        min_group_size: Optional[int] = None,
        config: Optional[AssignmentConfig] = None,
    ):
        """
        Initialize solver and check preconditions.

        Args:
            conflicts: Symmetric n×n relation of pre-existing forbidden pairs.
                Mutated during solving and restored before ``solve`` returns.
            min_group_size: Minimum group size; overrides ``config.min_group_size``
            config: Search options. Defaults to ``AssignmentConfig()``.

        Raises:
            AssignmentConfigurationError: If the relation or minimum size is rejected
        """
        self.config = config if config is not None else AssignmentConfig()
        self.min_group_size = (
            min_group_size if min_group_size is not None else self.config.min_group_size
        )
        self.conflicts: ConflictMatrix = as_conflict_matrix(conflicts)
        validate_inputs(self.conflicts, self.min_group_size)

        self.group_sizes: List[int] = group_sizes(self.conflicts.n, self.min_group_size)
        self.registry = SequenceRegistry()
        self.deadline = Deadline(None, self.config.clock)

        # Search statistics (reset on every solve)
        self.rounds_explored = 0
        self.dead_ends = 0

    @property
    def best_length(self) -> int:
        return self.registry.best_length

    @ga_logger.log_execution
    def solve(self) -> List[RoundSequence]:
        """
        Explore every order in which valid rounds can be appended.

        Returns:
            All sequences of maximum length. Sequences that differ only in the
            order of rounds or of groups within a round are all reported unless
            ``config.canonicalize`` is set.

        Raises:
            SearchTimeoutError: If ``config.timeout_seconds`` elapses first
            AssignmentVerificationError: If ``config.verify_results`` is set and
                a result fails verification
        """
        self.registry.clear()
        self.rounds_explored = 0
        self.dead_ends = 0
        self.deadline = Deadline(self.config.timeout_seconds, self.config.clock)

        if not ga_logger.disabled:
            ga_logger.section("Group Assignment Search")
            ga_logger.info(
                f"{self.conflicts.n} items, minimum group size {self.min_group_size}"
            )
            ga_logger.table(
                [[position, size] for position, size in enumerate(self.group_sizes)],
                headers=["Position", "Size"],
                title="Size plan",
            )
            ga_logger.conflict_matrix(self.conflicts, title="Initial conflicts")

        curr: List[Round] = []
        try:
            self._backtrack(curr)
        except GroupAssignmentError as e:
            log_detailed_error(
                e,
                {
                    "best_length": self.registry.best_length,
                    "recorded": len(self.registry),
                    "rounds_explored": self.rounds_explored,
                },
            )
            raise

        sequences = self.registry.sequences
        if self.config.canonicalize:
            sequences = canonicalize_sequences(sequences)
        if self.config.verify_results:
            verify_result_set(sequences, self.conflicts.n, self.conflicts)

        if not ga_logger.disabled:
            ga_logger.result("Best length", self.registry.best_length)
            ga_logger.result("Sequences", len(sequences))
            ga_logger.info(
                f"Explored {self.rounds_explored} round(s), {self.dead_ends} dead end(s) "
                f"in {self.deadline.elapsed():.3f}s"
            )
            if sequences:
                ga_logger.subsection("First sequence")
                ga_logger.info(format_sequence(sequences[0]))
            ga_logger.end_section()
        return sequences

    def _backtrack(self, curr: List[Round]) -> None:
        options = single_assignment(self.conflicts, self.group_sizes, self.deadline)
        self.rounds_explored += len(options)

        if not options:
            self.dead_ends += 1
            self.registry.record(curr)
            return

        for option in options:
            with self.conflicts.committed_groups(option):
                curr.append(option)
                try:
                    if _has_pairs(option):
                        self._backtrack(curr)
                    else:
                        # An all-singleton round consumes no pair and could repeat forever
                        self.registry.record(curr)
                finally:
                    curr.pop()


def make_assignments(
    conflicts: ConflictLike,
    min_group_size: Optional[int] = None,
    config: Optional[AssignmentConfig] = None,
) -> List[RoundSequence]:
    """
    Create every maximum-length sequence of rounds for the given minimum group size.

    ``conflicts`` is restored to its entry state before this returns.

    Example:
        >>> sequences = make_assignments(ConflictMatrix.empty(4), 2)
        >>> len(sequences[0])
        3
    """
    return AssignmentSolver(conflicts, min_group_size, config).solve()
