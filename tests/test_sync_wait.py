import asyncio
from dataclasses import dataclass

import pytest

from corosync.sync_wait import sync_wait


def test_simple_integer_return():
    async def func():
        return 11

    assert sync_wait(func()) == 11


def test_void():
    output = []

    async def func():
        output.append("hello from sync_wait<void>\n")

    assert sync_wait(func()) is None
    assert output == ["hello from sync_wait<void>\n"]


def test_task_awaited_twice():
    async def answer():
        return 42

    async def await_answer():
        a = asyncio.ensure_future(answer())
        v = await a
        assert v == 42
        v = await a
        assert v == 42
        return 1337

    assert sync_wait(await_answer()) == 1337


def test_task_that_throws():
    async def f():
        raise RuntimeError("I always throw!")

    with pytest.raises(RuntimeError, match="I always throw!"):
        sync_wait(f())


def test_result_without_default_constructor():
    @dataclass
    class A:
        value: int

    async def make_task():
        return A(42)

    assert sync_wait(make_task()).value == 42


@pytest.mark.asyncio
async def test_inside_running_loop_raises():
    async def f():
        return 1

    coro = f()
    with pytest.raises(RuntimeError):
        sync_wait(coro)
    coro.close()