import time
from typing import Callable, Optional

from grouprounds.exceptions import SearchTimeoutError


class Deadline:
    """
    Wall-clock budget consulted on every enumerator entry.

    A deadline without a timeout never expires. The clock is injectable so
    callers (and tests) can drive expiry deterministically.
    """

    __slots__ = ("timeout_seconds", "clock", "started_at", "expires_at")

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout_seconds = timeout_seconds
        self.clock = clock
        self.started_at: float = clock()
        self.expires_at: Optional[float] = (
            None if timeout_seconds is None else self.started_at + timeout_seconds
        )

    def expired(self) -> bool:
        if self.expires_at is None:
            return False
        return self.clock() >= self.expires_at

    def check(self, where: str = "search") -> None:
        """
        Raises:
            SearchTimeoutError: If the deadline has passed
        """
        if self.expired():
            raise SearchTimeoutError(
                f"Search exceeded its {self.timeout_seconds}s deadline in {where}"
            )

    def elapsed(self) -> float:
        return self.clock() - self.started_at
