from .status import (
    Status as Status,
    status as status,
    to_public as to_public,
)
from .status_code import (
    PUBLIC_STATUS_CODES as PUBLIC_STATUS_CODES,
    RETRYABLE_STATUS_CODES as RETRYABLE_STATUS_CODES,
    StatusCode as StatusCode,
)
