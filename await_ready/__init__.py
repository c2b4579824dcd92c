from .await_ready import (
    ArgumentIssue as ArgumentIssue,
    AwaitReadyFailure as AwaitReadyFailure,
    AwaitReadyResult as AwaitReadyResult,
    await_ready as await_ready,
)
from .errors import (
    AwaitReadyError as AwaitReadyError,
    ErrorCode as ErrorCode,
)
from .exit_codes import (
    ExitCode as ExitCode,
    to_exit_code as to_exit_code,
)
from .poll import (
    PollParams as PollParams,
    RetryContext as RetryContext,
    next_retry_context as next_retry_context,
    poll as poll,
)
from .protocols import Protocol as Protocol
from .status import (
    Status as Status,
    StatusCode as StatusCode,
)
from .targets import (
    ParsedTarget as ParsedTarget,
    parse_target as parse_target,
)
from .version import VERSION as VERSION
