import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class AssignmentConfig:
    """Configuration for the maximum-length assignment search."""

    min_group_size: int = 2
    canonicalize: bool = False
    timeout_seconds: Optional[float] = None
    verify_results: bool = False
    clock: Callable[[], float] = time.monotonic
