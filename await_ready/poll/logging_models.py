from await_ready.logging.models import Entry, LogLevel


class PollDebug(Entry, kw_only=True):
    host: str
    port: int
    protocol: str
    attempt: int
    elapsed: int
    level: LogLevel = LogLevel.DEBUG


class PollInfo(Entry, kw_only=True):
    host: str
    port: int
    protocol: str
    attempt: int
    elapsed: int
    level: LogLevel = LogLevel.INFO


class PollError(Entry, kw_only=True):
    host: str
    port: int
    protocol: str
    attempt: int
    elapsed: int
    code: str
    level: LogLevel = LogLevel.ERROR
