"""Run an awaitable to completion from synchronous code."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


def sync_wait(awaitable: Awaitable[T]) -> T:
    """Block until ``awaitable`` completes and return its result.

    Exceptions raised by the awaitable propagate to the caller. The call runs
    its own event loop, so it cannot be made from inside a running loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError("sync_wait cannot be called from a running event loop")

    async def _run() -> T:
        return await awaitable

    return asyncio.run(_run())