from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .http import ping_http
from .logging_models import PingError
from .mysql import ping_mysql
from .postgresql import ping_postgresql
from .protocol import Protocol
from .redis import ping_redis


DEFAULT_PING_TIMEOUT = 500


async def ping(
    protocol: Protocol,
    connection: Connection,
    ping_timeout: int = DEFAULT_PING_TIMEOUT,
    path: str | None = None,
    logger: Logger | None = None,
) -> Status:
    """
    Confirm that the service behind ``connection`` speaks ``protocol``.

    Takes ownership of the connection and closes it before returning.
    ``ping_timeout`` bounds the wait for the first response byte, in
    milliseconds (``0`` waits indefinitely).
    """
    match protocol:
        case Protocol.NONE:
            connection.close()
            return status(
                StatusCode.CONNECTED,
                "Connected",
            )

        case Protocol.HTTP | Protocol.HTTPS:
            return await ping_http(
                connection,
                ping_timeout=ping_timeout,
                path=path,
                logger=logger,
            )

        case Protocol.POSTGRESQL:
            return await ping_postgresql(
                connection,
                ping_timeout=ping_timeout,
                logger=logger,
            )

        case Protocol.MYSQL:
            return await ping_mysql(
                connection,
                ping_timeout=ping_timeout,
                logger=logger,
            )

        case Protocol.REDIS:
            return await ping_redis(
                connection,
                ping_timeout=ping_timeout,
                logger=logger,
            )

        case _:
            connection.close()

            owns_logger = logger is None
            if owns_logger:
                logger = Logger()

            await logger.log(
                PingError(
                    message=f"Protocol not supported: {protocol}",
                    protocol=str(protocol),
                    peer=connection.peer_host,
                    error="PROTOCOL_NOT_SUPPORTED",
                ),
                name="ping",
            )

            if owns_logger:
                await logger.close()

            return status(
                StatusCode.PROTOCOL_NOT_SUPPORTED,
                f"Protocol not supported: {protocol}",
            )
