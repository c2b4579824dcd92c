from await_ready.logging.models import Entry, LogLevel


class PingDebug(Entry, kw_only=True):
    protocol: str
    peer: str | None = None
    level: LogLevel = LogLevel.DEBUG


class PingError(Entry, kw_only=True):
    protocol: str
    peer: str | None = None
    error: str
    level: LogLevel = LogLevel.ERROR
