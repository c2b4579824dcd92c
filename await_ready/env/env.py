from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, StrictStr
from typing import Callable, Dict, Literal, Union

from await_ready.logging import LogLevelName

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    AWAIT_READY_TIMEOUT: StrictInt = Field(default=10_000, ge=0)
    AWAIT_READY_INTERVAL: StrictInt = Field(default=1_000, ge=10)
    AWAIT_READY_PING_TIMEOUT: StrictInt = Field(default=500, ge=0)
    AWAIT_READY_LOG_LEVEL: LogLevelName = "error"
    AWAIT_READY_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    AWAIT_READY_LOGS_DIRECTORY: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "AWAIT_READY_TIMEOUT": int,
            "AWAIT_READY_INTERVAL": int,
            "AWAIT_READY_PING_TIMEOUT": int,
            "AWAIT_READY_LOG_LEVEL": str,
            "AWAIT_READY_LOG_OUTPUT": str,
            "AWAIT_READY_LOGS_DIRECTORY": str,
        }
