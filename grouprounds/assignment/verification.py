from typing import Dict, Iterable, List, Optional, Set, Tuple

from grouprounds.elements.conflict_matrix import ConflictMatrix
from grouprounds.exceptions import AssignmentVerificationError
from grouprounds.assignment.types import Round, RoundSequence


def verify_round(
    assignment_round: Round, n: int, conflicts: Optional[ConflictMatrix] = None
) -> None:
    """
    Check that a round partitions all ``n`` items and, if ``conflicts`` is
    given, that no group contains a forbidden pair.

    Raises:
        AssignmentVerificationError: On overlap, missing items or conflicts
    """
    seen: Set[int] = set()
    for group in assignment_round:
        overlap = seen.intersection(group)
        if overlap:
            raise AssignmentVerificationError(
                f"Items {sorted(overlap)} appear in more than one group of round {assignment_round}"
            )
        seen.update(group)
        if conflicts is not None:
            for i, j in group.pairs():
                if conflicts.conflicting(i, j):
                    raise AssignmentVerificationError(
                        f"Group {group} contains forbidden pair ({i}, {j})"
                    )

    expected = set(range(n))
    if seen != expected:
        missing = sorted(expected - seen)
        extra = sorted(seen - expected)
        raise AssignmentVerificationError(
            f"Round does not partition {n} items: missing={missing} extra={extra}"
        )


def verify_sequence(
    sequence: RoundSequence, n: int, conflicts: Optional[ConflictMatrix] = None
) -> None:
    """
    Check every round of a sequence and that no pair shares a group twice.

    Raises:
        AssignmentVerificationError: If a round is invalid or a pair repeats
    """
    first_round: Dict[Tuple[int, int], int] = {}
    for number, assignment_round in enumerate(sequence, start=1):
        verify_round(assignment_round, n, conflicts)
        for group in assignment_round:
            for pair in group.pairs():
                if pair in first_round:
                    raise AssignmentVerificationError(
                        f"Pair {pair} grouped in round {first_round[pair]} and again in round {number}"
                    )
                first_round[pair] = number


def verify_result_set(
    sequences: Iterable[RoundSequence],
    n: int,
    conflicts: Optional[ConflictMatrix] = None,
) -> None:
    """
    Check that every sequence is valid and all share one length.

    Raises:
        AssignmentVerificationError: On the first invalid sequence or length mismatch
    """
    lengths: List[int] = []
    for sequence in sequences:
        verify_sequence(sequence, n, conflicts)
        lengths.append(len(sequence))
    if len(set(lengths)) > 1:
        raise AssignmentVerificationError(
            f"Result set mixes sequence lengths {sorted(set(lengths))}"
        )
