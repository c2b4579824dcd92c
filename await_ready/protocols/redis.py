from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .exchange import exchange


# Inline command, no RESP array framing needed.
PING_COMMAND = b"PING\r\n"

SIMPLE_STRING_PREFIX = "+"
ERROR_PREFIX = "-"


def parse_redis_response(data: bytes) -> Status:
    """
    ``+PONG`` means ready. Any RESP error (``-NOAUTH``, ``-LOADING``)
    still comes from a live Redis server and counts as ready too.
    """
    response = data.decode("utf-8", errors="replace").strip()

    if len(response) == 0:
        return status(
            StatusCode.INVALID_PROTOCOL,
            "Empty response from Redis",
        )

    if response.startswith(SIMPLE_STRING_PREFIX):
        return status(
            StatusCode.CONNECTED,
            "Redis is ready",
        )

    if response.startswith(ERROR_PREFIX):
        return status(
            StatusCode.CONNECTED,
            f"Redis is ready ({response})",
        )

    return status(
        StatusCode.INVALID_PROTOCOL,
        f"Invalid Redis response: {response}",
    )


async def ping_redis(
    connection: Connection,
    ping_timeout: int = 0,
    logger: Logger | None = None,
) -> Status:
    return await exchange(
        connection,
        "Redis",
        parse_redis_response,
        request=PING_COMMAND,
        ping_timeout=ping_timeout,
        logger=logger,
    )
