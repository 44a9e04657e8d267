# corosync

Synchronisation primitives, a task container and small socket helpers for
coroutine code built on `asyncio`. The package has no dependencies outside the
standard library.

## Modules

### `corosync.event`

- `Event(initially_set=False)` is a thread-safe one-shot signal. Coroutines
  `await event` and stay suspended until `set()` is called. Threads can call
  `wait()` and block until the same point. If the event is already set, awaiting
  it returns at once.
- `set(policy=ResumeOrderPolicy.LIFO)` sets the event and resumes every waiter.
  `ResumeOrderPolicy.LIFO` resumes the most recent waiter first.
  `ResumeOrderPolicy.FIFO` resumes them in the order they arrived. A waiter on
  another event loop is woken through that loop. Setting an event that is
  already set does nothing.
- `is_set()` reports the state. `reset()` returns the event to the unset state.

### `corosync.latch`

- `Latch(count)` becomes ready once `count_down(n=1)` has been called enough
  times to bring the count to zero. At that point everyone awaiting the latch
  resumes.
- A count of zero or less is ready from the start.
- `remaining()` returns the current count. `is_ready()` reports whether the
  latch has been released.

### `corosync.mutex`

- `Mutex` is a first-come first-served lock for coroutines.
- `await mutex.lock()` returns a `ScopedLock`. The lock is released when its
  `with` block exits or when its `unlock()` is called. Calling `unlock()` more
  than once has no further effect.
- `async with mutex.lock():` also works.
- `try_lock()` acquires the mutex only if it is free. `locked()` reports
  whether it is held.
- `Mutex.unlock()` hands the lock straight to the oldest waiter. It raises
  `RuntimeError` if the mutex is not locked.

### `corosync.sync_wait`

- `sync_wait(awaitable)` runs the awaitable on a fresh event loop and returns
  its result. Any exception the awaitable raises is raised again from the call.
- It raises `RuntimeError` if called from inside a running event loop.

### `corosync.task_container`

- `TaskContainer(reserve_size=8, growth_factor=2)` starts coroutines on the
  running loop with `start(user_task, cleanup=True)` and keeps each one until it
  finishes. Each task takes a slot.
- A finished task's slot is freed by `garbage_collect()`, or by the next
  `start()` when `cleanup` is true. When every slot is taken, the table grows
  by `growth_factor`.
- `size()`, `empty()`, `capacity()`, `delete_task_size()` and
  `delete_tasks_empty()` report on its state.
- `await container.garbage_collect_and_yield_until_empty()` waits until every
  started task has finished.
- Exceptions from user tasks are printed to stderr and are not propagated.

### `corosync.net_status`

- `RecvStatus` and `SendStatus` are `IntEnum`s of receive and send outcomes.
  Members based on error codes carry the platform's `errno` value.
- `str()` of a member gives its lower-case name, for example `"would_block"`.

### `corosync.hostname`

- `Hostname(data="")` is a frozen value that compares and orders by its text.
  It does not resolve anything.

### `corosync.net_socket`

- `Socket` owns a `socket.socket`. It offers `is_valid()`, `blocking(Blocking)`,
  `shutdown(how=socket.SHUT_RDWR)`, `close()` and `native_handle()`, and can be
  used as a context manager.
- `make_socket(SocketOptions(domain, type, blocking))` creates a socket.
  `SocketType` is either `UDP` or `TCP`; `Blocking` is either `YES` or `NO`.
- `make_accept_socket(opts, address, port, backlog=128)` also binds the socket
  with `SO_REUSEADDR`. TCP sockets are also set to listen.

### `corosync.tcp_client`

- `TcpClient(sock, options=None)` wraps an already connected `Socket` and puts
  it into non-blocking mode. `TcpClientOptions` holds `address` (default
  `"127.0.0.1"`) and `port` (default `8080`).
- `await wait_readable(timeout=None)` and `await wait_writable(timeout=None)`
  return `False` on timeout. A timeout of `None` or `0` waits indefinitely.
- `recv(size)` returns `(RecvStatus, bytes)`. A closed peer gives
  `RecvStatus.CLOSED`.
- `send(data)` returns `(SendStatus, unsent_bytes)`.
- Socket errors with a known `errno` are reported as status values rather than
  raised.

## Example

```python
import asyncio

from corosync.event import Event
from corosync.latch import Latch
from corosync.mutex import Mutex
from corosync.sync_wait import sync_wait


async def main() -> list[int]:
    event = Event()
    latch = Latch(3)
    mutex = Mutex()
    output: list[int] = []

    async def worker(i: int) -> None:
        await event
        with await mutex.lock():
            output.append(i)
        latch.count_down()

    tasks = [asyncio.ensure_future(worker(i)) for i in range(3)]
    await asyncio.sleep(0)
    event.set()
    await latch
    await asyncio.gather(*tasks)
    return sorted(output)


print(sync_wait(main()))  # [0, 1, 2]
```

## What it does not do

- There is no scheduler or thread pool of its own. Everything runs on `asyncio`
  event loops.
- There is no TCP server, no UDP client and no DNS resolution.
- `TcpClient` does not open connections. Connect the socket yourself, then hand
  it over.
- There is no TLS support. `SSL_ERROR` exists in the status enums but is never
  produced.

## Running the tests

```
pip install -e .[test]
pytest
```