"""A first-come first-served coroutine mutex with scoped lock holders."""

from __future__ import annotations

import asyncio
import threading
from collections import deque
from collections.abc import Generator
from typing import Any


class ScopedLock:
    """Holds an acquired mutex and releases it once, on ``unlock()`` or scope exit."""

    def __init__(self, mutex: Mutex) -> None:
        self._mutex: Mutex | None = mutex

    def unlock(self) -> None:
        """Release the mutex; calling this again has no further effect."""
        mutex, self._mutex = self._mutex, None
        if mutex is not None:
            mutex.unlock()

    def __enter__(self) -> ScopedLock:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unlock()


class _LockOperation:
    """Awaitable returned by ``Mutex.lock()``; also usable with ``async with``."""

    def __init__(self, mutex: Mutex) -> None:
        self._mutex = mutex
        self._held: ScopedLock | None = None

    def __await__(self) -> Generator[Any, None, ScopedLock]:
        return self._mutex._acquire().__await__()

    async def __aenter__(self) -> ScopedLock:
        self._held = await self._mutex._acquire()
        return self._held

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._held is not None:
            self._held.unlock()
            self._held = None


class Mutex:
    """A mutex for coroutines; waiters acquire it in the order they asked.

    On release the lock is handed straight to the oldest waiter, so it never
    appears unlocked while someone is queued for it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._locked = False
        self._waiters: deque[asyncio.Future] = deque()

    def lock(self) -> _LockOperation:
        """Return an awaitable that acquires the mutex and yields a ScopedLock."""
        return _LockOperation(self)

    def try_lock(self) -> bool:
        """Acquire the mutex if it is free; return whether it was acquired."""
        with self._lock:
            if self._locked:
                return False
            self._locked = True
            return True

    def unlock(self) -> None:
        """Release the mutex, handing it to the next waiter if there is one."""
        with self._lock:
            if not self._locked:
                raise RuntimeError("unlock of an unlocked mutex")
            if not self._waiters:
                self._locked = False
                return
            fut = self._waiters.popleft()
        self._grant(fut)

    def locked(self) -> bool:
        """Return True if the mutex is held."""
        with self._lock:
            return self._locked

    async def _acquire(self) -> ScopedLock:
        with self._lock:
            if not self._locked:
                self._locked = True
                return ScopedLock(self)
            fut = asyncio.get_running_loop().create_future()
            self._waiters.append(fut)
        try:
            await fut
        except asyncio.CancelledError:
            with self._lock:
                try:
                    self._waiters.remove(fut)
                    queued = True
                except ValueError:
                    queued = False
            if not queued and fut.done() and not fut.cancelled():
                # Ownership arrived just as we were cancelled; pass it on.
                self.unlock()
            raise
        return ScopedLock(self)

    def _handoff(self, fut: asyncio.Future) -> None:
        if fut.done():
            # The waiter gave up; the lock goes to the next one in line.
            self.unlock()
        else:
            fut.set_result(None)

    def _grant(self, fut: asyncio.Future) -> None:
        loop = fut.get_loop()
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            self._handoff(fut)
            return
        try:
            loop.call_soon_threadsafe(self._handoff, fut)
        except RuntimeError:
            self.unlock()