"""Core value types: groups and the conflict relation."""

from grouprounds.elements.group import Group
from grouprounds.elements.conflict_matrix import ConflictMatrix

__all__ = ["Group", "ConflictMatrix"]
