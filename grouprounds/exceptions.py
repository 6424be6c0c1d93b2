"""
Custom exceptions for the group assignment search.
"""

from __future__ import annotations


class GroupAssignmentError(Exception):
    """Base exception for group assignment errors."""

    pass


class AssignmentConfigurationError(GroupAssignmentError):
    """Raised when caller input is rejected before any search begins."""

    pass


class EmptyPopulationError(AssignmentConfigurationError):
    """Raised when there are no items to group."""

    pass


class MalformedConflictError(AssignmentConfigurationError):
    """Raised when the conflict relation is not a square, symmetric matrix."""

    pass


class InfeasibleMinimumError(AssignmentConfigurationError):
    """Raised when the minimum group size exceeds the number of items."""

    @staticmethod
    def check(n: int, min_group_size: int) -> None:
        """
        Raise an InfeasibleMinimumError if not even one group of the minimum size fits.

        Args:
            n: Number of items
            min_group_size: Requested minimum group size
        """
        if min_group_size > n:
            raise InfeasibleMinimumError(
                f"Minimum group size {min_group_size} exceeds the number of items ({n}); "
                f"no group can be formed."
            )


class InvalidMinimumError(AssignmentConfigurationError):
    """Raised when the minimum group size is smaller than one."""

    pass


class SearchTimeoutError(GroupAssignmentError):
    """Raised when the configured search deadline passes before the search completes."""

    pass


class AssignmentVerificationError(GroupAssignmentError):
    """Raised when a produced round or sequence violates a partition or no-repeat invariant."""

    pass
