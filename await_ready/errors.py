from enum import Enum


class ErrorCode(Enum):
    TIMEOUT = "TIMEOUT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNKNOWN = "UNKNOWN"
    HOST_NOT_FOUND = "HOST_NOT_FOUND"
    INVALID_PROTOCOL = "INVALID_PROTOCOL"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TIMEOUT: "Connection timed out",
    ErrorCode.VALIDATION_FAILED: "Validation failed",
    ErrorCode.UNKNOWN: "Unknown error",
    ErrorCode.HOST_NOT_FOUND: "Host not found",
    ErrorCode.INVALID_PROTOCOL: "Invalid protocol",
}


class AwaitReadyError(Exception):
    """Raised when a readiness wait fails and the caller asked for an exception."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.__cause__ = cause
        super().__init__(self.message)
