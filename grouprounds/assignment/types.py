from typing import List, Tuple

from grouprounds.elements.group import Group

# One round: groups in size-plan order, together covering every item exactly once
Round = Tuple[Group, ...]

# Successive rounds in search order
RoundSequence = List[Round]
