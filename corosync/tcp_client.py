"""A non-blocking tcp client over an already connected socket."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from corosync.net_socket import Blocking, Socket
from corosync.net_status import RecvStatus, SendStatus


@dataclass(frozen=True)
class TcpClientOptions:
    """Where the client connects to."""

    address: str = "127.0.0.1"
    port: int = 8080


def _resolve(fut: asyncio.Future) -> None:
    if not fut.done():
        fut.set_result(None)


class TcpClient:
    """Sends and receives on a connected tcp socket in non-blocking mode.

    Await ``wait_readable()`` before ``recv()``, and ``wait_writable()`` after
    a ``send()`` that left bytes unsent.
    """

    def __init__(self, sock: Socket, options: TcpClientOptions | None = None) -> None:
        self._socket = sock
        self.options = options if options is not None else TcpClientOptions()
        self._socket.blocking(Blocking.NO)

    def socket(self) -> Socket:
        """Return the socket this client uses."""
        return self._socket

    async def wait_readable(self, timeout: float | None = None) -> bool:
        """Wait until data can be read; None or 0 waits indefinitely.

        Return False if the timeout elapsed or the socket is not valid.
        """
        loop = asyncio.get_running_loop()
        return await self._wait(loop.add_reader, loop.remove_reader, timeout)

    async def wait_writable(self, timeout: float | None = None) -> bool:
        """Wait until data can be written; None or 0 waits indefinitely.

        Return False if the timeout elapsed or the socket is not valid.
        """
        loop = asyncio.get_running_loop()
        return await self._wait(loop.add_writer, loop.remove_writer, timeout)

    def recv(self, size: int) -> tuple[RecvStatus, bytes]:
        """Receive up to ``size`` bytes and return the status with the bytes read."""
        if size < 0:
            raise ValueError("size cannot be negative")
        if size == 0:
            return RecvStatus.OK, b""
        raw = self._socket._raw()
        if not self._socket.is_valid():
            return RecvStatus.BAD_FILE_DESCRIPTOR, b""
        try:
            data = raw.recv(size)
        except OSError as exc:
            return self._status(RecvStatus, exc), b""
        if not data:
            return RecvStatus.CLOSED, b""
        return RecvStatus.OK, data

    def send(self, data: bytes) -> tuple[SendStatus, bytes]:
        """Send ``data`` and return the status with the bytes left unsent."""
        view = memoryview(data)
        if not view:
            return SendStatus.OK, b""
        raw = self._socket._raw()
        if not self._socket.is_valid():
            return SendStatus.BAD_FILE_DESCRIPTOR, bytes(view)
        try:
            sent = raw.send(view)
        except OSError as exc:
            return self._status(SendStatus, exc), bytes(view)
        return SendStatus.OK, bytes(view[sent:])

    def close(self) -> None:
        """Close the connection."""
        self._socket.close()

    def __enter__(self) -> TcpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _status(kind, exc: OSError):
        try:
            return kind(exc.errno)
        except ValueError:
            raise exc from None

    async def _wait(self, add, remove, timeout: float | None) -> bool:
        if not self._socket.is_valid():
            return False
        fd = self._socket.native_handle()
        fut = asyncio.get_running_loop().create_future()
        add(fd, _resolve, fut)
        try:
            if timeout:
                try:
                    await asyncio.wait_for(fut, timeout)
                except asyncio.TimeoutError:
                    return False
            else:
                await fut
            return True
        finally:
            remove(fd)