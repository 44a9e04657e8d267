"""Coroutine synchronisation primitives, a task container and socket helpers for asyncio."""

__version__ = "0.1.0"

__all__ = [
    "event",
    "latch",
    "mutex",
    "sync_wait",
    "task_container",
    "net_status",
    "hostname",
    "net_socket",
    "tcp_client",
]