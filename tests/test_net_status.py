import errno

import pytest

from corosync.net_status import RecvStatus, SendStatus


def test_recv_status_fixed_values():
    assert RecvStatus(0) is RecvStatus.OK
    assert RecvStatus(-1) is RecvStatus.CLOSED
    assert RecvStatus(-2) is RecvStatus.UDP_NOT_BOUND
    assert RecvStatus(-3) is RecvStatus.SSL_ERROR


def test_recv_status_errno_values():
    assert RecvStatus(errno.EAGAIN) == errno.EAGAIN
    assert RecvStatus(errno.EWOULDBLOCK) == errno.EWOULDBLOCK
    assert RecvStatus(errno.ENOTCONN) is RecvStatus.NOT_CONNECTED


def test_recv_status_from_errno_round_trip():
    assert RecvStatus(errno.ECONNREFUSED) is RecvStatus.CONNECTION_REFUSED
    assert RecvStatus(int(RecvStatus.INTERRUPTED)) is RecvStatus.INTERRUPTED


def test_recv_status_unknown_value_raises():
    with pytest.raises(ValueError):
        RecvStatus(-100)


def test_recv_status_str():
    assert str(RecvStatus(-1)) == "closed"
    assert str(RecvStatus(0)) == "ok"
    assert str(RecvStatus(errno.EBADF)) == "bad_file_descriptor"


def test_send_status_values():
    assert SendStatus(0) is SendStatus.OK
    assert SendStatus(errno.EPIPE) is SendStatus.PIPE_CLOSED
    assert SendStatus(errno.ECONNRESET) is SendStatus.CONNECTION_RESET
    assert SendStatus(errno.EMSGSIZE) is SendStatus.MESSAGE_SIZE


def test_send_status_str():
    assert str(SendStatus(errno.EPIPE)) == "pipe_closed"