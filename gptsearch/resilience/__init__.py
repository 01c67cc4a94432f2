"""
Failure classification and retry handling for remote calls.
"""

from .errors import (
    ErrorKind,
    ClassifiedError,
    classify_error,
    parse_retry_after_ms,
    render_error_message
)
from .retry import RetryPolicy, RetryState, is_retriable, backoff_delay_ms, with_retry

__all__ = [
    "ErrorKind",
    "ClassifiedError",
    "classify_error",
    "parse_retry_after_ms",
    "render_error_message",
    "RetryPolicy",
    "RetryState",
    "is_retriable",
    "backoff_delay_ms",
    "with_retry",
]
