import asyncio

import pytest

from corosync.mutex import Mutex, ScopedLock


def test_try_lock_and_unlock():
    m = Mutex()
    assert m.try_lock() is True
    assert m.locked() is True
    assert m.try_lock() is False
    m.unlock()
    assert m.locked() is False
    assert m.try_lock() is True


def test_unlock_unlocked_raises():
    with pytest.raises(RuntimeError):
        Mutex().unlock()


def test_scoped_lock_unlock_is_idempotent():
    m = Mutex()
    assert m.try_lock()
    held = ScopedLock(m)
    held.unlock()
    held.unlock()
    assert m.locked() is False


def test_scoped_lock_context_manager_releases():
    m = Mutex()
    assert m.try_lock()
    with ScopedLock(m):
        assert m.locked()
    assert m.locked() is False


@pytest.mark.asyncio
async def test_await_lock_returns_scoped_lock():
    m = Mutex()
    with await m.lock():
        assert m.locked()
        assert m.try_lock() is False
    assert m.locked() is False


@pytest.mark.asyncio
async def test_waiters_acquire_in_fifo_order():
    m = Mutex()
    assert m.try_lock()
    order = []

    async def waiter(i):
        async with m.lock():
            order.append(i)

    tasks = [asyncio.ensure_future(waiter(i)) for i in range(3)]
    await asyncio.sleep(0)
    m.unlock()
    await asyncio.gather(*tasks)
    assert order == [0, 1, 2]
    assert m.locked() is False


@pytest.mark.asyncio
async def test_exclusive_critical_section():
    m = Mutex()
    active = 0
    peak = 0
    output = []

    async def critical(i):
        nonlocal active, peak
        async with m.lock():
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0)
            output.append(i)
            active -= 1

    await asyncio.gather(*(critical(i) for i in range(50)))
    assert peak == 1
    assert sorted(output) == list(range(50))
    assert m.locked() is False


@pytest.mark.asyncio
async def test_cancelled_waiter_is_skipped():
    m = Mutex()
    assert m.try_lock()

    async def waiter():
        async with m.lock():
            return "acquired"

    first = asyncio.ensure_future(waiter())
    second = asyncio.ensure_future(waiter())
    await asyncio.sleep(0)
    first.cancel()
    with pytest.raises(asyncio.CancelledError):
        await first
    m.unlock()
    assert await asyncio.wait_for(second, 1) == "acquired"
    assert m.locked() is False