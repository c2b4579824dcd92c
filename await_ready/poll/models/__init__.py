from .poll_params import (
    PollParams as PollParams,
    RetryCallback as RetryCallback,
)
