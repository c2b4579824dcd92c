from await_ready.logging.models import Entry, LogLevel


class TargetDebug(Entry, kw_only=True):
    target: str
    level: LogLevel = LogLevel.DEBUG
