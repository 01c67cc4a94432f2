"""
Error classification for remote call failures.

``classify_error`` is the only place that turns a caught failure into a
``ClassifiedError``; the retry engine and the message renderer both read
the result instead of re-deriving status, vendor type/code or retry hints.
"""

import math
from enum import Enum
from typing import Any, Mapping, Optional

QUOTA_ERROR = "insufficient_quota"
DEFAULT_STATUS = 500


class ErrorKind(str, Enum):
    """Taxonomy shared by the retry engine and the user-facing renderer."""
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMIT = "rate_limit"
    AUTHENTICATION = "authentication"
    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"


class ClassifiedError(Exception):
    """A remote call failure with its classification attached."""

    def __init__(
        self,
        message: str,
        status: int = DEFAULT_STATUS,
        body: Any = None,
        retry_after_ms: Optional[int] = None,
        error_type: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body
        self.retry_after_ms = retry_after_ms
        self.error_type = error_type
        self.error_code = error_code

    @property
    def is_quota_error(self) -> bool:
        return QUOTA_ERROR in (self.error_type, self.error_code)

    @property
    def kind(self) -> ErrorKind:
        if self.is_quota_error:
            return ErrorKind.QUOTA_EXCEEDED
        if self.status == 429:
            return ErrorKind.RATE_LIMIT
        if self.status == 401:
            return ErrorKind.AUTHENTICATION
        if self.status >= 500:
            return ErrorKind.SERVER_ERROR
        return ErrorKind.CLIENT_ERROR

    def __repr__(self) -> str:
        return (
            f"ClassifiedError(status={self.status}, type={self.error_type!r}, "
            f"code={self.error_code!r}, retry_after_ms={self.retry_after_ms}, "
            f"message={self.message!r})"
        )


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _status_of(exc: BaseException) -> Optional[int]:
    for candidate in (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(getattr(exc, "response", None), "status_code", None),
    ):
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return candidate
    return None


def _vendor_error(body: Any) -> Mapping[str, Any]:
    """The vendor error object: ``body["error"]`` or the body itself."""
    if not isinstance(body, Mapping):
        return {}
    nested = body.get("error")
    if isinstance(nested, Mapping):
        return nested
    return body


def _headers_of(exc: BaseException) -> Any:
    headers = getattr(getattr(exc, "response", None), "headers", None)
    if headers is None:
        headers = getattr(exc, "headers", None)
    return headers


def parse_retry_after_ms(headers: Any) -> Optional[int]:
    """
    Read a ``retry-after`` header given in seconds.

    Args:
        headers: Mapping-like headers, or None

    Returns:
        Optional[int]: Delay in milliseconds, None when absent, negative or not a finite number
    """
    if headers is None:
        return None
    try:
        value = headers.get("retry-after")
        if value is None:
            value = headers.get("Retry-After")
    except AttributeError:
        return None
    if value is None:
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return int(seconds * 1000)


def classify_error(exc: BaseException) -> ClassifiedError:
    """
    Build a ClassifiedError from a caught remote call failure.

    Vendor ``type``/``code`` come from the structured error body first and
    the failure's own attributes second. A failure without an HTTP status
    (timeouts, connection resets) is treated as status 500.

    Args:
        exc: The caught failure

    Returns:
        ClassifiedError: The classification; ``exc`` itself if already classified
    """
    if isinstance(exc, ClassifiedError):
        return exc

    body = getattr(exc, "body", None)
    vendor = _vendor_error(body)
    status = _status_of(exc)

    return ClassifiedError(
        message=str(exc) or exc.__class__.__name__,
        status=status if status is not None else DEFAULT_STATUS,
        body=body,
        retry_after_ms=parse_retry_after_ms(_headers_of(exc)),
        error_type=_as_str(vendor.get("type")) or _as_str(getattr(exc, "type", None)),
        error_code=_as_str(vendor.get("code")) or _as_str(getattr(exc, "code", None)),
    )


def _format_seconds(ms: int) -> str:
    return f"{ms / 1000:g}"


def render_error_message(
    error: ClassifiedError,
    service_name: str = "OpenAI",
    credential_name: str = "OPENAI_API_KEY",
) -> str:
    """
    User-facing text for a terminal remote call failure.

    Args:
        error: Classified failure
        service_name: Remote service name used in the messages
        credential_name: Environment variable holding the credential

    Returns:
        str: Message returned to the caller in place of a reply
    """
    kind = error.kind
    if kind is ErrorKind.QUOTA_EXCEEDED:
        return (
            f"Insufficient {service_name} credits. You have exceeded your current quota. "
            f"Please check your {service_name} plan and billing details."
        )
    if kind is ErrorKind.RATE_LIMIT:
        if error.retry_after_ms:
            return f"Rate limited. Please retry after {_format_seconds(error.retry_after_ms)} seconds."
        return "Rate limited. Please try again later."
    if kind is ErrorKind.AUTHENTICATION:
        return f"Authentication failed. Please check your {credential_name}."
    if kind is ErrorKind.SERVER_ERROR:
        return f"{service_name} service is temporarily unavailable. Please try again later."
    return f"Error ({error.status}): {error.message}"
