"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class MotionError(Exception):
    """Base exception for all library errors."""

    pass


class UpstreamError(MotionError):
    """Error response from the Motion API.

    Carries the HTTP status code and, when the upstream sent one, the decoded
    error body so callers can surface the API's own message.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RateLimitError(UpstreamError):
    """Upstream rate limit exceeded (HTTP 429).

    ``retry_after`` holds the upstream wait hint in seconds, or ``None`` when
    the response carried no usable ``Retry-After`` header.
    """

    def __init__(self, message: str, retry_after: float | None = None, body: Any = None) -> None:
        super().__init__(message, status_code=429, body=body)
        self.retry_after = retry_after


class ServerError(UpstreamError):
    """Upstream server failure (HTTP 5xx)."""

    pass


class ClientError(UpstreamError):
    """Request rejected by the upstream (HTTP 4xx other than 429).

    Retrying a malformed or unauthorized request cannot succeed.
    """

    pass


class TransportError(MotionError):
    """No HTTP response was received (connection failure, timeout)."""

    pass


class DeadlineExceededError(MotionError):
    """A caller-supplied per-call deadline expired.

    The in-flight attempt was abandoned. Whether to try again (and from which
    cursor) is left to the caller.
    """

    retryable = True

    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message)
        self.timeout = timeout


class ConfigurationError(MotionError):
    """Invalid or missing client configuration."""

    pass
