from __future__ import annotations

from enum import Enum


class Protocol(Enum):
    NONE = "none"
    HTTP = "http"
    HTTPS = "https"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    REDIS = "redis"

    @classmethod
    def parse(cls, name: str | Protocol) -> Protocol:
        if isinstance(name, Protocol):
            return name

        normalized = name.strip().lower()
        normalized = PROTOCOL_ALIASES.get(normalized, normalized)

        try:
            return cls(normalized)

        except ValueError:
            raise ValueError(
                f"'{name}' is not a supported protocol (expected one of {', '.join(protocol_names())})"
            ) from None


PROTOCOL_ALIASES = {
    "pg": Protocol.POSTGRESQL.value,
}


def protocol_names() -> list[str]:
    return [
        *[protocol.value for protocol in Protocol],
        *PROTOCOL_ALIASES.keys(),
    ]
