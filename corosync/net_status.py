"""Result codes for receiving and sending on network sockets."""

from __future__ import annotations

import enum
import errno


class RecvStatus(enum.IntEnum):
    """Outcome of a receive call; errno based members carry the errno value."""

    OK = 0
    CLOSED = -1
    """The peer closed the socket."""
    UDP_NOT_BOUND = -2
    """The udp socket has not been bound to a local port."""
    SSL_ERROR = -3
    TRY_AGAIN = errno.EAGAIN
    WOULD_BLOCK = errno.EWOULDBLOCK
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_REFUSED = errno.ECONNREFUSED
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    INVALID_ARGUMENT = errno.EINVAL
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK

    def __str__(self) -> str:
        return self.name.lower()


class SendStatus(enum.IntEnum):
    """Outcome of a send call; errno based members carry the errno value."""

    OK = 0
    SSL_ERROR = -3
    PERMISSION_DENIED = errno.EACCES
    TRY_AGAIN = errno.EAGAIN
    WOULD_BLOCK = errno.EWOULDBLOCK
    ALREADY_IN_PROGRESS = errno.EALREADY
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_RESET = errno.ECONNRESET
    NO_PEER_ADDRESS = errno.EDESTADDRREQ
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    IS_CONNECTION = errno.EISCONN
    MESSAGE_SIZE = errno.EMSGSIZE
    OUTPUT_QUEUE_FULL = errno.ENOBUFS
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK
    OPERATION_NOT_SUPPORTED = errno.EOPNOTSUPP
    PIPE_CLOSED = errno.EPIPE

    def __str__(self) -> str:
        return self.name.lower()