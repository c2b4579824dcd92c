from __future__ import annotations

from enum import Enum


class StatusCode(Enum):
    """
    Closed set of outcomes for a connection attempt.

    Public codes may be returned to callers of ``poll``. Internal codes
    only ever drive the retry decision inside the poll loop.
    """

    # Public
    CONNECTED = "CONNECTED"
    TIMEOUT = "TIMEOUT"
    HOST_NOT_FOUND = "HOST_NOT_FOUND"
    UNKNOWN = "UNKNOWN"
    PROTOCOL_NOT_SUPPORTED = "PROTOCOL_NOT_SUPPORTED"
    INVALID_PROTOCOL = "INVALID_PROTOCOL"

    # Internal
    SOCKET_CONNECTED = "SOCKET_CONNECTED"
    SHOULD_USE_IP_V4 = "SHOULD_USE_IP_V4"
    ECONNREFUSED = "ECONNREFUSED"
    EACCES = "EACCES"
    ECONNRESET = "ECONNRESET"
    ENOTFOUND = "ENOTFOUND"
    NO_DATA_RECEIVED = "NO_DATA_RECEIVED"
    UNKNOWN_PING_ERROR = "UNKNOWN_PING_ERROR"

    @property
    def is_public(self) -> bool:
        return self in PUBLIC_STATUS_CODES

    @property
    def is_retryable(self) -> bool:
        return self in RETRYABLE_STATUS_CODES


PUBLIC_STATUS_CODES = frozenset({
    StatusCode.CONNECTED,
    StatusCode.TIMEOUT,
    StatusCode.HOST_NOT_FOUND,
    StatusCode.UNKNOWN,
    StatusCode.PROTOCOL_NOT_SUPPORTED,
    StatusCode.INVALID_PROTOCOL,
})

RETRYABLE_STATUS_CODES = frozenset({
    StatusCode.ECONNREFUSED,
    StatusCode.EACCES,
    StatusCode.ECONNRESET,
    StatusCode.ENOTFOUND,
    StatusCode.NO_DATA_RECEIVED,
    StatusCode.UNKNOWN_PING_ERROR,
})
