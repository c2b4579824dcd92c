import asyncio
import math
import time
from typing import Awaitable, Callable

from await_ready.connection import ConnectionFactory, IPVersion
from await_ready.logging import Logger
from await_ready.protocols import ping
from await_ready.status import Status, StatusCode, status, to_public

from .logging_models import PollDebug, PollError, PollInfo
from .models import PollParams
from .retry_context import RetryContext, next_retry_context, should_retry


PingFunction = Callable[..., Awaitable[Status]]


class Poller:
    """
    Connect, probe, classify and retry until the target is ready, a
    terminal failure occurs or the timeout elapses.

    Exactly one attempt is in flight at a time. All retry decisions live
    here, connectors and probes never retry on their own.
    """

    def __init__(
        self,
        connection_factory: ConnectionFactory | None = None,
        ping_protocol: PingFunction = ping,
        logger: Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if logger is None:
            logger = Logger()

        if connection_factory is None:
            connection_factory = ConnectionFactory(logger=logger)

        self._logger = logger
        self._connection_factory = connection_factory
        self._ping = ping_protocol
        self._clock = clock
        self._sleep = sleep

    async def poll(self, params: PollParams) -> Status:
        start = self._clock()
        context = RetryContext()

        while True:
            result = await self._attempt(
                params,
                context.ip_version,
                self._connect_timeout(params.timeout, start),
            )

            elapsed = self._elapsed(start)

            if result.code == StatusCode.CONNECTED:
                await self._log_info(
                    f"{params.host}:{params.port} is ready ({result.message})",
                    params,
                    context,
                    elapsed,
                )

                return result

            previous = context
            context = next_retry_context(
                previous,
                result,
                params.interval,
            )

            if context.host_not_found and not params.wait_for_dns:
                await self._log_info(
                    f"Host not found: {params.host}",
                    params,
                    previous,
                    elapsed,
                )

                return status(
                    StatusCode.HOST_NOT_FOUND,
                    f"Host not found: {params.host}",
                    cause=result.cause,
                )

            if not should_retry(result):
                terminal = to_public(result)

                if terminal.code == StatusCode.UNKNOWN:
                    await self._logger.log(
                        PollError(
                            message=terminal.message,
                            host=params.host,
                            port=params.port,
                            protocol=params.protocol.value,
                            attempt=previous.attempt,
                            elapsed=elapsed,
                            code=terminal.code.value,
                        ),
                        name="poll",
                    )

                else:
                    await self._log_info(
                        f"Giving up: {terminal.message}",
                        params,
                        previous,
                        elapsed,
                    )

                return terminal

            if params.timeout > 0 and elapsed > params.timeout:
                await self._log_info(
                    f"Timed out after {elapsed}ms",
                    params,
                    previous,
                    elapsed,
                )

                return status(
                    StatusCode.TIMEOUT,
                    f"Timed out waiting for {params.host}:{params.port} after {elapsed}ms",
                    cause=result.cause,
                )

            await self._logger.log(
                PollDebug(
                    message=f"Attempt {previous.attempt} over IPv{previous.ip_version} failed: {result.message}",
                    host=params.host,
                    port=params.port,
                    protocol=params.protocol.value,
                    attempt=previous.attempt,
                    elapsed=elapsed,
                ),
                name="poll",
            )

            if params.on_retry:
                params.on_retry(previous.attempt, elapsed)

            await self._sleep(context.next_interval / 1000)

    async def _attempt(
        self,
        params: PollParams,
        ip_version: IPVersion,
        connect_timeout: int,
    ) -> Status:
        connected = await self._connection_factory.create(
            params.host,
            params.port,
            ip_version=ip_version,
            timeout=connect_timeout,
        )

        if connected.code != StatusCode.SOCKET_CONNECTED:
            return connected

        return await self._ping(
            params.protocol,
            connected.connection,
            ping_timeout=params.ping_timeout,
            path=params.path,
            logger=self._logger,
        )

    async def close(self):
        await self._logger.close()

    def _connect_timeout(self, timeout: int, start: float) -> int:
        if timeout == 0:
            return 0

        # A non-positive budget would mean "no bound" to the connector.
        return max(1, timeout - self._elapsed(start))

    def _elapsed(self, start: float) -> int:
        return math.floor((self._clock() - start) * 1000)

    async def _log_info(
        self,
        message: str,
        params: PollParams,
        context: RetryContext,
        elapsed: int,
    ):
        await self._logger.log(
            PollInfo(
                message=message,
                host=params.host,
                port=params.port,
                protocol=params.protocol.value,
                attempt=context.attempt,
                elapsed=elapsed,
            ),
            name="poll",
        )


async def poll(
    params: PollParams | None = None,
    logger: Logger | None = None,
    **kwargs,
) -> Status:
    """
    Wait for ``host:port`` to accept connections and, when a protocol is
    given, to answer its readiness probe.

    Accepts either a ready ``PollParams`` or its fields as keyword
    arguments. Always returns a status with a public code.
    """
    if params is None:
        params = PollParams(**kwargs)

    owns_logger = logger is None
    poller = Poller(logger=logger)

    try:
        return await poller.poll(params)

    finally:
        if owns_logger:
            await poller.close()
