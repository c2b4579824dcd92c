"""
Loopback listeners for end to end tests.

``loopback_server`` starts an ``asyncio`` server on 127.0.0.1 with the
given connection handler and returns its port. Handlers must close their
writer so the server can shut down.
"""

import asyncio
from typing import Awaitable, Callable

import pytest


Handler = Callable[[asyncio.StreamReader, asyncio.StreamWriter], Awaitable[None]]


@pytest.fixture
async def loopback_server():
    servers: list[asyncio.Server] = []

    async def start(handler: Handler) -> int:
        server = await asyncio.start_server(handler, "127.0.0.1", 0)
        servers.append(server)

        return server.sockets[0].getsockname()[1]

    yield start

    for server in servers:
        server.close()
        await server.wait_closed()
