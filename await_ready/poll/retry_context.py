from dataclasses import dataclass

from await_ready.connection import IPVersion
from await_ready.status import Status, StatusCode


@dataclass(slots=True, frozen=True)
class RetryContext:
    """
    Per-poll retry state. Never mutated: each attempt derives the next
    context through ``next_retry_context``.
    """

    attempt: int = 1
    ip_version: IPVersion = 4
    ipv4_not_found: bool = False
    ipv6_not_found: bool = False
    next_interval: int = 0

    @property
    def host_not_found(self) -> bool:
        return self.ipv4_not_found and self.ipv6_not_found


def next_retry_context(
    previous: RetryContext,
    latest: Status,
    interval: int,
) -> RetryContext:
    """
    Fold the status of the attempt described by ``previous`` into the
    context for the next attempt.

    Families alternate 4, 6, 4, 6... The IPv6 attempt follows its IPv4
    sibling immediately, rounds are separated by ``interval`` ms.
    """
    not_found = latest.code == StatusCode.ENOTFOUND

    return RetryContext(
        attempt=previous.attempt + 1,
        ip_version=6 if previous.ip_version == 4 else 4,
        ipv4_not_found=previous.ipv4_not_found or (
            not_found and previous.ip_version == 4
        ),
        ipv6_not_found=previous.ipv6_not_found or (
            not_found and previous.ip_version == 6
        ),
        next_interval=0 if previous.ip_version == 4 else interval,
    )


def should_retry(latest: Status) -> bool:
    return latest.code.is_retryable
