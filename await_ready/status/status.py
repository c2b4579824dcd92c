from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .status_code import StatusCode

if TYPE_CHECKING:
    from await_ready.connection import Connection


@dataclass(slots=True, frozen=True)
class Status:
    """Immutable result of a single connect or probe step."""

    code: StatusCode
    message: str
    cause: BaseException | None = None
    connection: Connection | None = None

    def __post_init__(self):
        if self.code == StatusCode.SOCKET_CONNECTED and self.connection is None:
            raise ValueError("A SOCKET_CONNECTED status requires an open connection")

        if self.code != StatusCode.SOCKET_CONNECTED and self.connection is not None:
            raise ValueError(f"A {self.code.value} status cannot carry a connection")

    @property
    def is_public(self) -> bool:
        return self.code.is_public

    @property
    def succeeded(self) -> bool:
        return self.code == StatusCode.CONNECTED

    def __repr__(self) -> str:
        return f"Status(code={self.code.value}, message={self.message!r})"


def status(
    code: StatusCode,
    message: str,
    cause: BaseException | None = None,
    connection: Connection | None = None,
) -> Status:
    return Status(
        code=code,
        message=message,
        cause=cause,
        connection=connection,
    )


def to_public(result: Status) -> Status:
    """Narrow a status to the public partition, folding stray internal codes into UNKNOWN."""
    if result.is_public:
        return result

    if result.connection is not None:
        result.connection.close()

    return status(
        StatusCode.UNKNOWN,
        f"Unexpected internal status: {result.code.value} ({result.message})",
        cause=result.cause,
    )
