"""
MySQL readiness check.

The server speaks first: right after the TCP handshake it sends an
initial handshake packet (protocol v10),

    [3 bytes] payload length
    [1 byte]  sequence id, always 0
    [1 byte]  protocol version, 10 for MySQL 5+ and MariaDB
    [n bytes] server version string and capabilities

or, when it refuses the client (too many connections, host blocked), an
error packet whose first payload byte is 0xFF. Both prove a live MySQL
server, so only the header is inspected.
"""

from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .exchange import exchange


MIN_PACKET_SIZE = 5
SEQUENCE_ID_OFFSET = 3
PROTOCOL_VERSION_OFFSET = 4

HANDSHAKE_V10 = 10
ERR_PACKET_MARKER = 0xFF


def parse_mysql_handshake(data: bytes) -> Status:
    if len(data) < MIN_PACKET_SIZE:
        return status(
            StatusCode.INVALID_PROTOCOL,
            "Packet too short for MySQL handshake",
        )

    sequence_id = data[SEQUENCE_ID_OFFSET]
    protocol_version = data[PROTOCOL_VERSION_OFFSET]

    if sequence_id != 0:
        return status(
            StatusCode.INVALID_PROTOCOL,
            f"Unexpected sequence id: {sequence_id}",
        )

    if protocol_version == ERR_PACKET_MARKER:
        return status(
            StatusCode.CONNECTED,
            "MySQL is ready (error packet)",
        )

    if protocol_version != HANDSHAKE_V10:
        return status(
            StatusCode.INVALID_PROTOCOL,
            f"Unsupported MySQL protocol version: {protocol_version}",
        )

    return status(
        StatusCode.CONNECTED,
        "MySQL is ready",
    )


async def ping_mysql(
    connection: Connection,
    ping_timeout: int = 0,
    logger: Logger | None = None,
) -> Status:
    return await exchange(
        connection,
        "MySQL",
        parse_mysql_handshake,
        ping_timeout=ping_timeout,
        logger=logger,
    )
