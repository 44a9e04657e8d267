"""An awaitable one-shot event that resumes every waiter once it is set."""

from __future__ import annotations

import asyncio
import enum
import threading
from collections.abc import Generator
from typing import Any


class ResumeOrderPolicy(enum.Enum):
    """Order in which waiters are resumed when an event is set."""

    LIFO = "lifo"
    FIFO = "fifo"


def _resolve(fut: asyncio.Future) -> None:
    if not fut.done():
        fut.set_result(None)


def _wake(fut: asyncio.Future) -> None:
    """Complete a waiter's future on its own loop, from any thread."""
    loop = fut.get_loop()
    try:
        running = asyncio.get_running_loop()
    except RuntimeError:
        running = None
    if running is loop:
        _resolve(fut)
        return
    try:
        loop.call_soon_threadsafe(_resolve, fut)
    except RuntimeError:
        # The waiter's loop is closed; nobody is left to resume.
        pass


class Event:
    """A thread safe event that coroutines can await and threads can block on.

    Awaiting an unset event suspends until ``set()`` is called; awaiting a set
    event continues immediately.
    """

    def __init__(self, initially_set: bool = False) -> None:
        self._lock = threading.Lock()
        self._cond = threading.Condition(self._lock)
        self._set = bool(initially_set)
        self._waiters: list[asyncio.Future] = []

    def is_set(self) -> bool:
        """Return True if the event is currently set."""
        with self._lock:
            return self._set

    def set(self, policy: ResumeOrderPolicy = ResumeOrderPolicy.LIFO) -> None:
        """Set the event and resume every waiter in the order given by ``policy``."""
        with self._cond:
            if self._set:
                return
            self._set = True
            waiters, self._waiters = self._waiters, []
            self._cond.notify_all()
        ordered = waiters if policy is ResumeOrderPolicy.FIFO else reversed(waiters)
        for fut in ordered:
            _wake(fut)

    def reset(self) -> None:
        """Return a set event to the unset state; an unset event is left alone."""
        with self._lock:
            self._set = False

    def wait(self) -> None:
        """Block the calling thread until the event is set."""
        with self._cond:
            self._cond.wait_for(lambda: self._set)

    def __await__(self) -> Generator[Any, None, None]:
        with self._lock:
            if self._set:
                return
            fut = asyncio.get_running_loop().create_future()
            self._waiters.append(fut)
        try:
            yield from fut.__await__()
        except asyncio.CancelledError:
            with self._lock:
                if fut in self._waiters:
                    self._waiters.remove(fut)
            raise