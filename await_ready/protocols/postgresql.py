import struct

from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .exchange import exchange


# SSLRequest: int32 message length followed by the int32 request code, big-endian.
SSL_REQUEST_CODE = 80877103
SSL_REQUEST = struct.pack("!ii", 8, SSL_REQUEST_CODE)

SSL_SUPPORTED = b"S"
SSL_NOT_SUPPORTED = b"N"


def parse_postgresql_response(data: bytes) -> Status:
    if len(data) == 0:
        return status(
            StatusCode.INVALID_PROTOCOL,
            "Empty response to PostgreSQL SSLRequest",
        )

    if data == SSL_SUPPORTED:
        return status(
            StatusCode.CONNECTED,
            "PostgreSQL is ready (SSL supported)",
        )

    if data == SSL_NOT_SUPPORTED:
        return status(
            StatusCode.CONNECTED,
            "PostgreSQL is ready (SSL not supported)",
        )

    return status(
        StatusCode.INVALID_PROTOCOL,
        f"Unexpected response to PostgreSQL SSLRequest: {data[:16]!r}",
    )


async def ping_postgresql(
    connection: Connection,
    ping_timeout: int = 0,
    logger: Logger | None = None,
) -> Status:
    return await exchange(
        connection,
        "PostgreSQL",
        parse_postgresql_response,
        request=SSL_REQUEST,
        ping_timeout=ping_timeout,
        logger=logger,
    )
