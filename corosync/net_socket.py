"""An owning socket wrapper and factories for client and server sockets."""

from __future__ import annotations

import enum
import socket
from dataclasses import dataclass


class SocketType(enum.Enum):
    """Kind of socket."""

    UDP = "udp"
    TCP = "tcp"


class Blocking(enum.Enum):
    """Whether system calls on the socket block."""

    YES = "yes"
    NO = "no"


_TYPE_TO_OS = {
    SocketType.UDP: socket.SOCK_DGRAM,
    SocketType.TCP: socket.SOCK_STREAM,
}


@dataclass(frozen=True)
class SocketOptions:
    """How to create a socket."""

    domain: socket.AddressFamily
    type: SocketType
    blocking: Blocking


class Socket:
    """Owns an operating-system socket and closes it when done."""

    def __init__(self, sock: socket.socket | None = None) -> None:
        self._sock = sock

    def is_valid(self) -> bool:
        """Return True if a socket is held; it may still be unusable."""
        return self._sock is not None and self._sock.fileno() != -1

    def blocking(self, block: Blocking) -> bool:
        """Put the socket in the given blocking mode; return whether it worked."""
        if not self.is_valid():
            return False
        try:
            self._sock.setblocking(block is Blocking.YES)
        except OSError:
            return False
        return True

    def shutdown(self, how: int = socket.SHUT_RDWR) -> bool:
        """Shut down the given directions; return whether it worked."""
        if not self.is_valid():
            return False
        try:
            self._sock.shutdown(how)
        except OSError:
            return False
        return True

    def close(self) -> None:
        """Close the socket and leave this object invalid."""
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    def native_handle(self) -> int:
        """Return the file descriptor, or -1 if no socket is held."""
        if self._sock is None:
            return -1
        return self._sock.fileno()

    def _raw(self) -> socket.socket | None:
        return self._sock

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def make_socket(opts: SocketOptions) -> Socket:
    """Create a socket as described by ``opts``."""
    sock = socket.socket(opts.domain, _TYPE_TO_OS[opts.type])
    result = Socket(sock)
    if opts.blocking is Blocking.NO and not result.blocking(Blocking.NO):
        result.close()
        raise OSError("failed to set socket to non-blocking mode")
    return result


def make_accept_socket(
    opts: SocketOptions, address: str, port: int, backlog: int = 128
) -> Socket:
    """Create a socket bound to ``address``:``port``; tcp sockets also listen."""
    result = make_socket(opts)
    sock = result._raw()
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((address, port))
        if opts.type is SocketType.TCP:
            sock.listen(backlog)
    except OSError:
        result.close()
        raise
    return result