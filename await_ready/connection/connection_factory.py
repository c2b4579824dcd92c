import asyncio
import socket
from typing import Literal

from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .connection import Connection
from .errors import classify_connect_error
from .logging_models import ConnectorDebug, ConnectorError, ConnectorTrace


IPVersion = Literal[4, 6]

_FAMILIES: dict[int, socket.AddressFamily] = {
    4: socket.AF_INET,
    6: socket.AF_INET6,
}


class ConnectionFactory:
    def __init__(self, logger: Logger | None = None) -> None:
        self._owns_logger = logger is None
        if self._owns_logger:
            logger = Logger()

        self._logger = logger

    async def create(
        self,
        host: str,
        port: int,
        ip_version: IPVersion = 4,
        timeout: int = 0,
    ) -> Status:
        """
        Open one TCP connection to ``host:port`` over the given IP version.

        ``timeout`` is in milliseconds, ``0`` leaves the OS connect timeout as
        the only bound. Always resolves to exactly one status. On success the
        status carries a paused ``Connection`` that the caller now owns.
        """
        await self._logger.log(
            ConnectorDebug(
                message=f"Connecting to {host}:{port} (IPv{ip_version})",
                host=host,
                port=port,
                ip_version=ip_version,
            ),
            name="connection",
        )

        try:
            if timeout > 0:
                connection = await asyncio.wait_for(
                    self._open(host, port, ip_version),
                    timeout / 1000,
                )

            else:
                connection = await self._open(host, port, ip_version)

        except TimeoutError as err:
            if err.errno is not None:
                return await self._failed(host, port, ip_version, err)

            await self._logger.log(
                ConnectorDebug(
                    message=f"Connection timeout after {timeout}ms",
                    host=host,
                    port=port,
                    ip_version=ip_version,
                ),
                name="connection",
            )

            return status(
                StatusCode.TIMEOUT,
                f"Connection timeout after {timeout}ms",
                cause=err,
            )

        except Exception as err:
            return await self._failed(host, port, ip_version, err)

        await self._logger.log(
            ConnectorDebug(
                message=f"Connected to {host}:{port}",
                host=host,
                port=port,
                ip_version=ip_version,
            ),
            name="connection",
        )

        return status(
            StatusCode.SOCKET_CONNECTED,
            f"Connected to {host}:{port}",
            connection=connection,
        )

    async def close(self):
        if self._owns_logger:
            await self._logger.close()

    async def _open(
        self,
        host: str,
        port: int,
        ip_version: IPVersion,
    ) -> Connection:
        loop = asyncio.get_running_loop()

        addresses = await loop.getaddrinfo(
            host,
            port,
            family=_FAMILIES[ip_version],
            type=socket.SOCK_STREAM,
            proto=socket.IPPROTO_TCP,
        )

        family, type_, proto, _, address = addresses[0]

        await self._logger.log(
            ConnectorTrace(
                message=f"Resolved {host} to {address[0]}",
                host=host,
                port=port,
                ip_version=ip_version,
            ),
            name="connection",
        )

        tcp_socket = socket.socket(family=family, type=type_, proto=proto)

        try:
            tcp_socket.setblocking(False)
            tcp_socket.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

            await loop.sock_connect(tcp_socket, address)

            reader, writer = await asyncio.open_connection(sock=tcp_socket)

        except BaseException:
            # Also runs on cancellation by the connect timer.
            tcp_socket.close()
            raise

        connection = Connection(reader, writer, ip_version)
        connection.pause()

        return connection

    async def _failed(
        self,
        host: str,
        port: int,
        ip_version: IPVersion,
        err: Exception,
    ) -> Status:
        result = classify_connect_error(err)

        if result.code == StatusCode.UNKNOWN:
            await self._logger.log(
                ConnectorError(
                    message=result.message,
                    host=host,
                    port=port,
                    ip_version=ip_version,
                    error=repr(err),
                ),
                name="connection",
            )

        else:
            await self._logger.log(
                ConnectorDebug(
                    message=result.message,
                    host=host,
                    port=port,
                    ip_version=ip_version,
                ),
                name="connection",
            )

        return result


async def create_connection(
    host: str,
    port: int,
    ip_version: IPVersion = 4,
    timeout: int = 0,
    logger: Logger | None = None,
) -> Status:
    factory = ConnectionFactory(logger=logger)

    try:
        return await factory.create(
            host,
            port,
            ip_version=ip_version,
            timeout=timeout,
        )

    finally:
        await factory.close()
