from typing import Any, Dict, List, Optional

from grouprounds.assignment.types import RoundSequence
from grouprounds.logger import ga_logger, format_round


def summarize_assignments(
    sequences: List[RoundSequence],
    labels: Optional[Dict[int, str]] = None,
    limit: Optional[int] = None,
) -> List[List[Any]]:
    """
    Flatten sequences into ``[sequence, round, groups]`` rows and log them as a table.

    Args:
        sequences: Result set from the search
        labels: Optional item display names
        limit: Maximum number of sequences to include
    """
    rows: List[List[Any]] = []
    shown = sequences if limit is None else sequences[:limit]
    for seq_number, sequence in enumerate(shown, start=1):
        for round_number, assignment_round in enumerate(sequence, start=1):
            rows.append([seq_number, round_number, format_round(assignment_round, labels)])

    if not ga_logger.disabled:
        ga_logger.table(
            rows,
            headers=["Sequence", "Round", "Groups"],
            title=f"{len(sequences)} sequence(s)",
        )
    return rows
