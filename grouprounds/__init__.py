"""Maximum-length no-repeat group rounds."""

__all__ = [
    "ConflictMatrix",
    "Group",
    "AssignmentConfig",
    "group_sizes",
    "potential_groups",
    "single_assignment",
    "make_assignments",
]


def __getattr__(name):
    if name in {"ConflictMatrix", "Group"}:
        from .elements import ConflictMatrix, Group

        return locals()[name]
    if name in {
        "AssignmentConfig",
        "group_sizes",
        "potential_groups",
        "single_assignment",
        "make_assignments",
    }:
        from .assignment import (
            AssignmentConfig,
            group_sizes,
            potential_groups,
            single_assignment,
            make_assignments,
        )

        return locals()[name]
    raise AttributeError(name)
