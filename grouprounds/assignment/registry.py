from __future__ import annotations
from typing import List, Sequence

from grouprounds.assignment.types import Round, RoundSequence
from grouprounds.logger import ga_logger

"""
Sequence registry for the assignment search.

This module provides SequenceRegistry, which keeps only the completed
sequences that share the longest length seen so far.
"""


class SequenceRegistry:
    """
    Registry of completed round sequences of maximum length.

    Recording a longer sequence discards everything recorded before it;
    recording a shorter one is a no-op.
    """

    def __init__(self):
        self.best_length: int = 0
        self.sequences: List[RoundSequence] = []

    def record(self, sequence: Sequence[Round]) -> bool:
        """
        Offer a completed sequence.

        The sequence is copied, so the caller may keep mutating its own stack.

        Returns:
            True if the sequence was kept
        """
        length = len(sequence)
        if length < self.best_length:
            return False
        if length > self.best_length:
            if not ga_logger.disabled:
                ga_logger.debug(
                    f"[SequenceRegistry] New best length {length} "
                    f"(discarding {len(self.sequences)} sequence(s) of length {self.best_length})"
                )
            self.sequences.clear()
            self.best_length = length
        self.sequences.append(list(sequence))
        return True

    def clear(self) -> None:
        self.best_length = 0
        self.sequences = []

    def __len__(self) -> int:
        return len(self.sequences)
