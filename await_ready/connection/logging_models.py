"""
Logging models for the connection module.

Every entry carries the target and the address family of the attempt so
dual-stack fallback can be followed in the logs.
"""

from await_ready.logging.models import Entry, LogLevel


class ConnectorTrace(Entry, kw_only=True):
    host: str
    port: int
    ip_version: int
    level: LogLevel = LogLevel.TRACE


class ConnectorDebug(Entry, kw_only=True):
    host: str
    port: int
    ip_version: int
    level: LogLevel = LogLevel.DEBUG


class ConnectorError(Entry, kw_only=True):
    host: str
    port: int
    ip_version: int
    error: str
    level: LogLevel = LogLevel.ERROR
