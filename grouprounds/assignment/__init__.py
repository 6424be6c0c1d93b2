"""Grouping, round and sequence enumeration."""

from grouprounds.assignment.config import AssignmentConfig
from grouprounds.assignment.group_sizes import group_sizes
from grouprounds.assignment.potential_groups import potential_groups
from grouprounds.assignment.single_assignment import single_assignment
from grouprounds.assignment.solver import AssignmentSolver, make_assignments
from grouprounds.assignment.greedy import greedy_assignment
from grouprounds.assignment.canonical import canonicalize_sequences
from grouprounds.assignment.verification import (
    verify_round,
    verify_sequence,
    verify_result_set,
)

__all__ = [
    "AssignmentConfig",
    "group_sizes",
    "potential_groups",
    "single_assignment",
    "AssignmentSolver",
    "make_assignments",
    "greedy_assignment",
    "canonicalize_sequences",
    "verify_round",
    "verify_sequence",
    "verify_result_set",
]
