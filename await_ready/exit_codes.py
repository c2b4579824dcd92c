from enum import IntEnum

from await_ready.status import Status, StatusCode


class ExitCode(IntEnum):
    SUCCESS = 0
    TIMEOUT = 1
    VALIDATION_ERROR = 2
    UNKNOWN_ERROR = 3
    CONNECTION_ERROR = 4


def to_exit_code(result: Status) -> ExitCode:
    match result.code:
        case StatusCode.CONNECTED:
            return ExitCode.SUCCESS

        case StatusCode.TIMEOUT:
            return ExitCode.TIMEOUT

        case StatusCode.HOST_NOT_FOUND:
            return ExitCode.CONNECTION_ERROR

        case _:
            return ExitCode.UNKNOWN_ERROR
