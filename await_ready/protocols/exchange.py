from typing import Callable

from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .logging_models import PingDebug


async def exchange(
    connection: Connection,
    protocol_name: str,
    parse_response: Callable[[bytes], Status],
    request: bytes | None = None,
    ping_timeout: int = 0,
    logger: Logger | None = None,
) -> Status:
    """
    Run one request/response round trip over an already connected socket.

    Sends ``request`` (server-first protocols pass ``None``), waits up to
    ``ping_timeout`` milliseconds for the first bytes and hands them to
    ``parse_response``. The connection is closed on every path.
    """
    owns_logger = logger is None
    if owns_logger:
        logger = Logger()

    try:
        return await _exchange(
            connection,
            protocol_name,
            parse_response,
            request,
            ping_timeout,
            logger,
        )

    finally:
        if owns_logger:
            await logger.close()


async def _exchange(
    connection: Connection,
    protocol_name: str,
    parse_response: Callable[[bytes], Status],
    request: bytes | None,
    ping_timeout: int,
    logger: Logger,
) -> Status:
    peer = connection.peer_host

    try:
        if request is not None:
            connection.write(request)

        data = await connection.read_first(
            timeout=ping_timeout / 1000 if ping_timeout > 0 else None,
        )

    except TimeoutError:
        await logger.log(
            PingDebug(
                message=f"No data received in {ping_timeout}ms",
                protocol=protocol_name,
                peer=peer,
            ),
            name="ping",
        )

        return status(
            StatusCode.NO_DATA_RECEIVED,
            f"No data received in {ping_timeout}ms",
        )

    except Exception as err:
        await logger.log(
            PingDebug(
                message=f"Socket error: {err}",
                protocol=protocol_name,
                peer=peer,
            ),
            name="ping",
        )

        return status(
            StatusCode.UNKNOWN_PING_ERROR,
            f"Socket error while pinging {protocol_name} server",
            cause=err,
        )

    finally:
        connection.close()

    result = parse_response(data)

    await logger.log(
        PingDebug(
            message=f"Data received ({len(data)} bytes): {result.message}",
            protocol=protocol_name,
            peer=peer,
        ),
        name="ping",
    )

    return result
