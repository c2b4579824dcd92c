from __future__ import annotations
from enum import Enum
from typing import Literal

LogLevelName = Literal[
    'trace',
    'debug',
    'info',
    'warn',
    'error',
    'critical',
    'fatal'
]


class LogLevel(Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    FATAL = 'FATAL'

    @property
    def severity(self) -> int:
        # Declaration order is severity order.
        return list(LogLevel).index(self)

    def __ge__(self, other: LogLevel) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented

        return self.severity >= other.severity

    @classmethod
    def to_level(cls, level_name: LogLevelName) -> LogLevel:
        try:
            return cls(level_name.upper())

        except ValueError:
            raise ValueError(
                f"'{level_name}' is not a valid log level (expected one of {', '.join(level.value.lower() for level in cls)})"
            ) from None
