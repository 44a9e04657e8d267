"""A container that owns started tasks until they finish and recycles their slots."""

from __future__ import annotations

import asyncio
import sys
import threading
from collections import deque
from collections.abc import Awaitable
from typing import Any


class TaskContainer:
    """Start tasks on the running event loop and keep them alive until they finish.

    Each started task takes a slot. A finished task marks its slot for
    deletion, and garbage collection returns the slot to the free pool. When
    every slot is in use, the slot table grows by ``growth_factor``.
    Exceptions raised by a user task are reported on stderr and never
    propagate out of the container.
    """

    def __init__(self, reserve_size: int = 8, growth_factor: float = 2) -> None:
        if reserve_size < 0:
            raise ValueError("reserve_size cannot be negative")
        self._lock = threading.Lock()
        self._size_lock = threading.Lock()
        self._size = 0
        self._growth_factor = growth_factor
        self._tasks: list[asyncio.Task | None] = [None] * reserve_size
        self._free: deque[int] = deque(range(reserve_size))
        self._to_delete: list[int] = []

    def start(self, user_task: Awaitable[Any], cleanup: bool = True) -> None:
        """Store ``user_task`` and start running it on the current event loop.

        With ``cleanup`` set, finished tasks are garbage collected first so
        their slots can be reused.
        """
        loop = asyncio.get_running_loop()
        with self._size_lock:
            self._size += 1

        with self._lock:
            if cleanup:
                self._gc_internal()
            if not self._free:
                self._grow()
            index = self._free.popleft()
            self._tasks[index] = loop.create_task(self._run(user_task, index))

    def garbage_collect(self) -> int:
        """Free the slots of finished tasks and return how many were freed."""
        with self._lock:
            return self._gc_internal()

    def delete_task_size(self) -> int:
        """Return the number of finished tasks awaiting garbage collection."""
        with self._lock:
            return len(self._to_delete)

    def delete_tasks_empty(self) -> bool:
        """Return True if no finished tasks await garbage collection."""
        with self._lock:
            return not self._to_delete

    def size(self) -> int:
        """Return the number of tasks that have not finished yet."""
        with self._size_lock:
            return self._size

    def empty(self) -> bool:
        """Return True if every started task has finished."""
        return self.size() == 0

    def capacity(self) -> int:
        """Return the number of slots available before the container must grow."""
        with self._lock:
            return len(self._tasks)

    async def garbage_collect_and_yield_until_empty(self) -> None:
        """Collect finished tasks and yield to the loop until all tasks are done."""
        while not self.empty():
            self.garbage_collect()
            await asyncio.sleep(0)

    def _grow(self) -> None:
        current = len(self._tasks)
        new_size = max(int(current * self._growth_factor), current + 1)
        self._free.extend(range(current, new_size))
        self._tasks.extend([None] * (new_size - current))

    def _gc_internal(self) -> int:
        deleted = len(self._to_delete)
        for index in self._to_delete:
            self._free.append(index)
            self._tasks[index] = None
        self._to_delete.clear()
        return deleted

    async def _run(self, user_task: Awaitable[Any], index: int) -> None:
        try:
            await user_task
        except Exception as exc:
            print(
                f"task_container user_task had an unhandled exception e= {exc}",
                file=sys.stderr,
            )
        finally:
            with self._lock:
                self._to_delete.append(index)
                with self._size_lock:
                    self._size -= 1