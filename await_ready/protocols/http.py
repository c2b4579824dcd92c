from await_ready.connection import Connection
from await_ready.logging import Logger
from await_ready.status import Status, StatusCode, status

from .exchange import exchange


DEFAULT_PATH = "/"


def build_http_request(path: str | None, host: str | None) -> bytes:
    if not path:
        path = DEFAULT_PATH

    if host is None:
        host = "localhost"

    elif ":" in host:
        host = f"[{host}]"

    return f"GET {path} HTTP/1.1\r\nHost: {host}\r\n\r\n".encode()


def parse_http_response(data: bytes) -> Status:
    """
    Accept any well formed HTTP status line.

    The numeric status code is not checked. A 500 still proves the
    endpoint is up and speaking HTTP.
    """
    response = data.decode("latin-1")

    if len(response) == 0:
        return status(
            StatusCode.INVALID_PROTOCOL,
            "Empty response from server",
        )

    status_line = response.split("\r\n", maxsplit=1)[0]
    parts = status_line.split(" ")

    if len(parts) < 2:
        return status(
            StatusCode.INVALID_PROTOCOL,
            f"Invalid HTTP status line: {status_line}",
        )

    http_version, status_code = parts[0], parts[1]

    if not http_version.startswith("HTTP/"):
        return status(
            StatusCode.INVALID_PROTOCOL,
            f"Not an HTTP response: {status_line}",
        )

    return status(
        StatusCode.CONNECTED,
        f"HTTP {status_code}",
    )


async def ping_http(
    connection: Connection,
    ping_timeout: int = 0,
    path: str | None = None,
    logger: Logger | None = None,
) -> Status:
    return await exchange(
        connection,
        "HTTP",
        parse_http_response,
        request=build_http_request(path, connection.peer_host),
        ping_timeout=ping_timeout,
        logger=logger,
    )
