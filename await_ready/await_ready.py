from dataclasses import dataclass, field
from typing import Literal

from pydantic import ValidationError

from await_ready.errors import AwaitReadyError, ErrorCode
from await_ready.logging import Logger
from await_ready.poll import PollParams, RetryCallback, poll
from await_ready.protocols import Protocol
from await_ready.status import Status, StatusCode


FailureType = Literal[
    "TimeoutError",
    "HostNotFoundError",
    "InvalidProtocolError",
    "UnknownError",
    "ArgumentError",
]

_FAILURE_TYPES: dict[StatusCode, FailureType] = {
    StatusCode.TIMEOUT: "TimeoutError",
    StatusCode.HOST_NOT_FOUND: "HostNotFoundError",
    StatusCode.INVALID_PROTOCOL: "InvalidProtocolError",
}

_ERROR_CODES: dict[FailureType, ErrorCode] = {
    "TimeoutError": ErrorCode.TIMEOUT,
    "HostNotFoundError": ErrorCode.HOST_NOT_FOUND,
    "InvalidProtocolError": ErrorCode.INVALID_PROTOCOL,
    "UnknownError": ErrorCode.UNKNOWN,
    "ArgumentError": ErrorCode.VALIDATION_FAILED,
}


@dataclass(slots=True, frozen=True)
class ArgumentIssue:
    """A single rejected argument."""

    message: str
    """Human readable reason."""

    path: tuple[str | int, ...]
    """Location of the offending value, e.g. ``("port",)``."""

    code: str
    """Machine readable validation error type."""


@dataclass(slots=True, frozen=True)
class AwaitReadyFailure:
    type: FailureType
    message: str
    cause: BaseException | None = None
    issues: tuple[ArgumentIssue, ...] = field(default_factory=tuple)

    @property
    def error_code(self) -> ErrorCode:
        return _ERROR_CODES[self.type]


@dataclass(slots=True, frozen=True)
class AwaitReadyResult:
    success: bool
    error: AwaitReadyFailure | None = None

    def unwrap(self) -> None:
        if self.success:
            return

        raise AwaitReadyError(
            self.error.error_code,
            message=self.error.message,
            cause=self.error.cause,
        )


def to_result(result: Status) -> AwaitReadyResult:
    if result.code == StatusCode.CONNECTED:
        return AwaitReadyResult(success=True)

    return AwaitReadyResult(
        success=False,
        error=AwaitReadyFailure(
            type=_FAILURE_TYPES.get(result.code, "UnknownError"),
            message=result.message,
            cause=result.cause,
        ),
    )


def to_argument_failure(err: ValidationError) -> AwaitReadyFailure:
    return AwaitReadyFailure(
        type="ArgumentError",
        message=f"Invalid arguments: {err.error_count()} validation error(s)",
        cause=err,
        issues=tuple(
            ArgumentIssue(
                message=issue["msg"],
                path=tuple(issue["loc"]),
                code=issue["type"],
            )
            for issue in err.errors()
        ),
    )


async def await_ready(
    host: str,
    port: int,
    timeout: int = 10_000,
    interval: int = 500,
    protocol: Protocol | str = Protocol.NONE,
    path: str | None = None,
    wait_for_dns: bool = False,
    ping_timeout: int = 500,
    on_retry: RetryCallback | None = None,
    logger: Logger | None = None,
) -> AwaitReadyResult:
    """
    Wait until ``host:port`` is ready and report the outcome as a result
    value instead of a status code. Never raises for invalid arguments or
    network conditions, call ``unwrap()`` on the result to get an
    ``AwaitReadyError`` instead.
    """
    try:
        params = PollParams(
            host=host,
            port=port,
            timeout=timeout,
            interval=interval,
            protocol=protocol,
            path=path,
            wait_for_dns=wait_for_dns,
            ping_timeout=ping_timeout,
            on_retry=on_retry,
        )

    except ValidationError as err:
        return AwaitReadyResult(
            success=False,
            error=to_argument_failure(err),
        )

    return to_result(
        await poll(params, logger=logger),
    )
