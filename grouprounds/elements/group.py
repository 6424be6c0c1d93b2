# group.py
from typing import Tuple, Dict, Iterator, List, Any, Optional, Iterable
from functools import total_ordering


@total_ordering
class Group:
    __slots__ = ("indices", "labels", "bitmask")

    def __init__(
        self, indices: Iterable[int], labels: Optional[Dict[int, str]] = None
    ):
        """
        Group represents a set of items placed together in one round.
        labels: optional dict mapping item indices to display names.
        Indices are stored sorted and unique.
        """
        self.indices: Tuple[int, ...] = tuple(sorted(set(indices)))
        if not self.indices:
            raise ValueError("A group must contain at least one item")

        self.labels: Dict[int, str] = labels or {}
        # Bitmask for fast equality and containment checks
        bitmask = 0
        for idx in self.indices:
            bitmask |= 1 << idx
        self.bitmask: int = bitmask

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, int):
            return bool(self.bitmask >> item & 1) if item >= 0 else False
        return False

    def __getitem__(self, index: int) -> int:
        return self.indices[index]

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Group):
            return self.indices < other.indices
        if isinstance(other, tuple):
            return self.indices < tuple(sorted(set(other)))
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Group):
            return self.bitmask == other.bitmask
        # Equal to the plain tuple of its sorted indices, e.g. group == (0, 2)
        if isinstance(other, tuple):
            return self.indices == other
        return NotImplemented

    def __hash__(self) -> int:
        # Same hash as the equal plain tuple, so sets and dicts may mix the two
        return hash(self.indices)

    def __str__(self) -> str:
        names: List[str] = [self.labels.get(i, str(i)) for i in self.indices]
        return f"({', '.join(names)})"

    def __repr__(self) -> str:
        return f"Group{self.indices}"

    @property
    def size(self) -> int:
        return len(self.indices)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Yield every unordered pair (i, j) with i < j inside the group."""
        for pos, i in enumerate(self.indices):
            for j in self.indices[pos + 1 :]:
                yield (i, j)

    def is_disjoint(self, other: "Group") -> bool:
        return not (self.bitmask & other.bitmask)

    def with_labels(self, labels: Dict[int, str]) -> "Group":
        return Group(self.indices, labels)

    def __json__(self) -> List[int]:
        return list(self.indices)

    def to_dict(self) -> Dict[str, Tuple[int, ...]]:
        return {"indices": self.indices}
