from .models import (
    PollParams as PollParams,
    RetryCallback as RetryCallback,
)
from .poll import (
    Poller as Poller,
    poll as poll,
)
from .retry_context import (
    RetryContext as RetryContext,
    next_retry_context as next_retry_context,
    should_retry as should_retry,
)
