"""Text formatting utilities for logging."""

from typing import Any, Dict, Iterable, Optional, Set


def format_set(s: Set[Any]) -> str:
    """Format set for consistent display."""
    if not s:
        return "∅"
    return "{" + ", ".join(str(x) for x in sorted(s)) + "}"


def format_group(group: Iterable[int], labels: Optional[Dict[int, str]] = None) -> str:
    """Format a group as '(a, b, ...)'.

    Uses the group's own labels when it carries them (a ``Group``), then the
    explicit ``labels`` mapping, then the raw indices.
    """
    names = labels if labels is not None else getattr(group, "labels", None) or {}
    return "(" + ", ".join(names.get(i, str(i)) for i in group) + ")"


def format_round(groups: Iterable[Iterable[int]], labels: Optional[Dict[int, str]] = None) -> str:
    """Format a round as a space-separated list of groups."""
    return " ".join(format_group(g, labels) for g in groups)


def format_sequence(
    rounds: Iterable[Iterable[Iterable[int]]], labels: Optional[Dict[int, str]] = None
) -> str:
    """Format a sequence as one numbered line per round."""
    lines = [
        f"Round {number}: {format_round(groups, labels)}"
        for number, groups in enumerate(rounds, start=1)
    ]
    if not lines:
        return "(no rounds)"
    return "\n".join(lines)
