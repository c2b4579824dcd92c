"""
Test doubles for the connect/probe/poll pipeline.

Scripted connection factories and probes replace the network so the poll
loop can be driven deterministically, and a manual clock replaces both
``time.monotonic`` and ``asyncio.sleep``.
"""

from dataclasses import dataclass, field
from typing import Callable

from await_ready.protocols import Protocol
from await_ready.status import Status, StatusCode, status


class MockConnection:
    """Stand-in for ``Connection`` with a canned response."""

    def __init__(
        self,
        response: bytes | None = b"",
        error: Exception | None = None,
        peer_host: str | None = "127.0.0.1",
    ) -> None:
        self.response = response
        self.error = error
        self.peer_host = peer_host
        self.written: list[bytes] = []
        self.read_timeouts: list[float | None] = []
        self.closed = False

    def pause(self):
        pass

    def resume(self):
        pass

    def write(self, data: bytes):
        self.written.append(data)

    async def read_first(self, timeout: float | None = None, limit: int = 2**16):
        self.read_timeouts.append(timeout)

        if self.error is not None:
            raise self.error

        return self.response

    def close(self):
        self.closed = True


@dataclass
class ConnectCall:
    host: str
    port: int
    ip_version: int
    timeout: int


class MockConnectionFactory:
    """
    Returns scripted statuses in order. A ``StatusCode.SOCKET_CONNECTED``
    entry yields a fresh ``MockConnection``. The last entry repeats once
    the script runs out.
    """

    def __init__(
        self,
        script: list[StatusCode | Status],
        on_attempt: Callable[[], None] | None = None,
    ) -> None:
        self.script = script
        self.on_attempt = on_attempt
        self.calls: list[ConnectCall] = []
        self.connections: list[MockConnection] = []

    @property
    def ip_versions(self) -> list[int]:
        return [call.ip_version for call in self.calls]

    async def create(
        self,
        host: str,
        port: int,
        ip_version: int = 4,
        timeout: int = 0,
    ) -> Status:
        index = min(len(self.calls), len(self.script) - 1)
        self.calls.append(
            ConnectCall(
                host=host,
                port=port,
                ip_version=ip_version,
                timeout=timeout,
            )
        )

        if self.on_attempt:
            self.on_attempt()

        scripted = self.script[index]
        if isinstance(scripted, Status):
            return scripted

        if scripted == StatusCode.SOCKET_CONNECTED:
            connection = MockConnection()
            self.connections.append(connection)

            return status(
                StatusCode.SOCKET_CONNECTED,
                f"Connected to {host}:{port}",
                connection=connection,
            )

        return status(scripted, f"Scripted {scripted.value}")


@dataclass
class MockPing:
    """Probe replacement returning scripted codes, closing each connection."""

    script: list[StatusCode]
    protocols: list[Protocol] = field(default_factory=list)

    async def __call__(
        self,
        protocol: Protocol,
        connection: MockConnection,
        ping_timeout: int = 500,
        path: str | None = None,
        logger=None,
    ) -> Status:
        index = min(len(self.protocols), len(self.script) - 1)
        self.protocols.append(protocol)
        connection.close()

        code = self.script[index]
        return status(code, f"Scripted {code.value}")


class ManualClock:
    """Monotonic clock in seconds that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds

    async def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingLogger:
    """Stand-in for ``Logger`` that keeps entries in memory."""

    instances: list["RecordingLogger"] = []

    def __init__(self) -> None:
        self.entries: list[tuple[str | None, object]] = []
        self.closed = False
        RecordingLogger.instances.append(self)

    async def log(self, entry, name: str | None = None, **kwargs):
        self.entries.append((name, entry))

    async def close(self):
        self.closed = True
