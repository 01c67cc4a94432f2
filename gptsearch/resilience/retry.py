"""
Retry policy for remote calls.

Only classified remote failures with status 429 or 5xx are retried, and
never quota exhaustion. The delay is the server's retry-after hint when it
sent one, otherwise ``base_delay_ms * 2 ** (attempt - 1)``. There is no
jitter and no state shared between calls.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import ClassifiedError

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry and how long to wait in between."""
    max_retries: int = 2
    base_delay_ms: int = 300


@dataclass
class RetryState:
    """Attempt bookkeeping for a single call."""
    attempt: int = 0
    total_backoff_ms: int = 0


def is_retriable(exc: BaseException) -> bool:
    """Whether a failure is worth another attempt."""
    if not isinstance(exc, ClassifiedError):
        return False
    if exc.is_quota_error:
        return False
    return exc.status == 429 or 500 <= exc.status <= 599


def backoff_delay_ms(error: ClassifiedError, attempt: int, policy: RetryPolicy) -> int:
    """
    Delay before the next attempt.

    Args:
        error: The failure that ended the previous attempt
        attempt: 1-based number of the failed attempt
        policy: Retry policy in effect

    Returns:
        int: Delay in milliseconds
    """
    if error.retry_after_ms:
        return error.retry_after_ms
    return policy.base_delay_ms * 2 ** (attempt - 1)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: Optional[RetryPolicy] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run ``operation`` and retry it according to ``policy``.

    Args:
        operation: Zero-argument coroutine function performing one attempt
        policy: Retry policy; defaults to 2 retries with a 300 ms base delay
        sleep: Awaitable sleep taking seconds, replaceable in tests

    Returns:
        The operation's result

    Raises:
        The last failure, unchanged, once it is not retriable or retries ran out
    """
    policy = policy or RetryPolicy()
    state = RetryState()

    while True:
        try:
            return await operation()
        except Exception as e:
            state.attempt += 1
            if not is_retriable(e):
                raise
            if state.attempt > policy.max_retries:
                if policy.max_retries:
                    logger.warning(
                        f"Giving up after {policy.max_retries} retries "
                        f"({state.total_backoff_ms} ms total backoff), last status {e.status}"
                    )
                raise

            delay_ms = backoff_delay_ms(e, state.attempt, policy)
            state.total_backoff_ms += delay_ms
            logger.warning(
                f"Remote call failed with status {e.status}, retrying in {delay_ms} ms "
                f"(retry {state.attempt}/{policy.max_retries})"
            )
            await sleep(delay_ms / 1000)
