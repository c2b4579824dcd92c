import asyncio
import socket


class Connection:
    """
    An established TCP connection handed from the connector to a probe.

    The transport is paused on creation. Incoming bytes are buffered and
    never consumed until a probe calls ``resume()``, so protocols where
    the server speaks first lose nothing.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        ip_version: int,
    ) -> None:
        self.reader = reader
        self.writer = writer
        self.ip_version = ip_version
        self.transport: asyncio.Transport = writer.transport
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed or self.transport.is_closing()

    @property
    def socket(self) -> socket.socket | None:
        return self.transport.get_extra_info("socket")

    @property
    def peer_host(self) -> str | None:
        peername = self.transport.get_extra_info("peername")
        if not peername:
            return None

        return peername[0]

    def pause(self):
        self.transport.pause_reading()

    def resume(self):
        self.transport.resume_reading()

    def write(self, data: bytes):
        self.writer.write(data)

    async def read_first(
        self,
        timeout: float | None = None,
        limit: int = 2**16,
    ) -> bytes:
        """
        Wait for the first chunk of data sent by the peer.

        Raises ``TimeoutError`` when ``timeout`` (seconds) elapses first and
        ``ConnectionResetError`` when the peer closes before sending anything.
        """
        self.resume()

        await self.writer.drain()

        if timeout:
            data = await asyncio.wait_for(
                self.reader.read(limit),
                timeout,
            )

        else:
            data = await self.reader.read(limit)

        if len(data) == 0:
            raise ConnectionResetError("Connection closed by peer before any data was received")

        return data

    def close(self):
        if self._closed:
            return

        self._closed = True

        try:
            self.transport.abort()

        except Exception:
            pass

    def __repr__(self) -> str:
        return f"Connection(peer={self.peer_host!r}, ip_version={self.ip_version}, closed={self.closed})"
