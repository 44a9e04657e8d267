"""A countdown latch that resumes its waiters when the count reaches zero."""

from __future__ import annotations

import threading
from collections.abc import Generator
from typing import Any

from corosync.event import Event


class Latch:
    """Wait for one or more other tasks to signal completion via ``count_down()``.

    A count of zero or less makes the latch ready from the start.
    """

    def __init__(self, count: int) -> None:
        self._lock = threading.Lock()
        self._count = count
        self._event = Event(count <= 0)

    def is_ready(self) -> bool:
        """Return True once the latch has been counted down to zero."""
        return self._event.is_set()

    def remaining(self) -> int:
        """Return how many completions the latch is still waiting for."""
        with self._lock:
            return self._count

    def count_down(self, n: int = 1) -> None:
        """Count ``n`` completions; reaching zero resumes whoever awaits the latch."""
        with self._lock:
            previous = self._count
            self._count -= n
        if previous <= n:
            self._event.set()

    def __await__(self) -> Generator[Any, None, None]:
        return self._event.__await__()