import re
from dataclasses import dataclass

from await_ready.logging import Logger
from await_ready.protocols import Protocol, protocol_names

from .logging_models import TargetDebug


DEFAULT_PORTS: dict[Protocol, int] = {
    Protocol.HTTP: 80,
    Protocol.HTTPS: 443,
    Protocol.POSTGRESQL: 5432,
    Protocol.MYSQL: 3306,
    Protocol.REDIS: 6379,
}

_SCHEME_PATTERN = re.compile(r"^(\w+)://")
_PORT_PATTERN = re.compile(r"^[0-9]+$")


@dataclass(slots=True, frozen=True)
class ParsedTarget:
    protocol: Protocol
    host: str
    port: int
    path: str | None = None


async def parse_target(
    target: str,
    logger: Logger | None = None,
) -> ParsedTarget | None:
    """
    Split a command line target into protocol, host, port and path.

    Accepts ``3000``, ``:8080``, ``host:3000`` and
    ``scheme://host[:port][/path]``. Invalid input yields ``None`` and a
    debug log entry describing the problem.
    """
    if not target:
        return await _rejected(logger, target, "'target' is required")

    remaining = target
    protocol = Protocol.NONE

    scheme_match = _SCHEME_PATTERN.match(remaining)
    if scheme_match:
        scheme = scheme_match.group(1).lower()

        try:
            protocol = Protocol.parse(scheme)

        except ValueError:
            return await _rejected(
                logger,
                target,
                f"'{scheme}' is not a supported protocol (expected {', '.join(protocol_names())})",
            )

        remaining = remaining[scheme_match.end():]

    path: str | None = None
    path_start = remaining.find("/")
    if path_start != -1:
        path = remaining[path_start:]
        remaining = remaining[:path_start]

    parts = remaining.split(":")
    if len(parts) > 2:
        return await _rejected(
            logger,
            target,
            f"'{target}' is an invalid target, too many ':' separators",
        )

    if (
        scheme_match
        and len(parts) == 1
        and parts[0]
        and not _PORT_PATTERN.match(parts[0])
    ):
        default_port = DEFAULT_PORTS.get(protocol)
        if default_port is None:
            return await _rejected(
                logger,
                target,
                f"'{target}' is an invalid target, '{protocol.value}' has no default port",
            )

        return ParsedTarget(
            protocol=protocol,
            host=parts[0],
            port=default_port,
            path=path,
        )

    host = (parts[0] or "localhost") if len(parts) == 2 else "localhost"
    port_text = parts[0] if len(parts) == 1 else parts[1]

    if not port_text or not _PORT_PATTERN.match(port_text):
        return await _rejected(
            logger,
            target,
            f"'{target}' is an invalid target, '{port_text}' is not a valid port number",
        )

    port = int(port_text)
    if port < 1 or port > 65535:
        return await _rejected(
            logger,
            target,
            f"'{target}' is an invalid target, port {port} is out of range (1 - 65535)",
        )

    return ParsedTarget(
        protocol=protocol,
        host=host,
        port=port,
        path=path,
    )


async def _rejected(logger: Logger | None, target: str, message: str) -> None:
    owns_logger = logger is None
    if owns_logger:
        logger = Logger()

    await logger.log(
        TargetDebug(
            message=message,
            target=target,
        ),
        name="targets",
    )

    if owns_logger:
        await logger.close()

    return None
