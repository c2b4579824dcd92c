from typing import Any, Callable

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)

from await_ready.protocols import Protocol


RetryCallback = Callable[[int, int], Any]


class PollParams(BaseModel):
    host: StrictStr = Field(min_length=1)
    port: StrictInt = Field(ge=1, le=65535)
    timeout: StrictInt = Field(default=10_000, ge=0)
    interval: StrictInt = Field(default=500, ge=10)
    protocol: Protocol = Protocol.NONE
    path: StrictStr | None = None
    wait_for_dns: StrictBool = False
    ping_timeout: StrictInt = Field(default=500, ge=0)
    on_retry: RetryCallback | None = None

    @field_validator("protocol", mode="before")
    @classmethod
    def parse_protocol(cls, value: Any):
        if isinstance(value, str):
            return Protocol.parse(value)

        return value
