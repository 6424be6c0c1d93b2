"""
Canonical forms for rounds and sequences.

The search itself reports every ordering of the same groups within a round and
of the same rounds within a sequence. These helpers collapse such permutations
for callers that only care about distinct schedules.
"""

from typing import List, Set, Tuple

from grouprounds.assignment.types import Round, RoundSequence

RoundKey = Tuple[Tuple[int, ...], ...]


def canonical_round(assignment_round: Round) -> Round:
    """Groups sorted by their smallest indices."""
    return tuple(sorted(assignment_round))


def round_key(assignment_round: Round) -> RoundKey:
    return tuple(g.indices for g in canonical_round(assignment_round))


def canonical_sequence(sequence: RoundSequence) -> RoundSequence:
    """Each round canonicalized, rounds sorted by their canonical keys."""
    return sorted((canonical_round(r) for r in sequence), key=round_key)


def canonicalize_sequences(sequences: List[RoundSequence]) -> List[RoundSequence]:
    """Canonicalize every sequence and drop repeats, keeping first-seen order."""
    seen: Set[Tuple[RoundKey, ...]] = set()
    unique: List[RoundSequence] = []
    for sequence in sequences:
        canonical = canonical_sequence(sequence)
        key = tuple(round_key(r) for r in canonical)
        if key in seen:
            continue
        seen.add(key)
        unique.append(canonical)
    return unique
