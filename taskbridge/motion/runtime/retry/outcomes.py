"""Attempt outcomes and failure classification.

Every attempt made by the executor ends in exactly one of three variants:
``Success``, ``RetryableFailure`` or ``FatalFailure``. Exceptions raised by
the wrapped operation are converted into one of the failure variants by
``classify_failure``, so the retry loop branches on an explicit tag instead
of on ``except`` clauses.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any, Generic, TypeVar, Union

import aiohttp

from ...core.enums import FailureKind
from ...core.exceptions import RateLimitError, TransportError, UpstreamError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    kind = FailureKind.SUCCESS


@dataclass(frozen=True)
class RetryableFailure:
    """A failure worth another attempt.

    Attributes:
        cause: The exception raised by the attempt
        suggested_delay_ms: Upstream-directed wait (429 ``Retry-After``), if any
    """

    cause: BaseException
    suggested_delay_ms: float | None = None

    kind = FailureKind.RETRYABLE


@dataclass(frozen=True)
class FatalFailure:
    """A failure that no amount of retrying can fix."""

    cause: BaseException

    kind = FailureKind.FATAL


AttemptOutcome = Union[Success[Any], RetryableFailure, FatalFailure]


@dataclass(frozen=True)
class AttemptEvent:
    """Observability record emitted once per attempt.

    Attributes:
        attempt: 1-based attempt number
        max_attempts: Attempt budget from the policy
        classification: Outcome of this attempt
        delay_ms: Delay scheduled before the next attempt (None when no
            further attempt will be made)
        hinted: Whether ``delay_ms`` came from an upstream wait hint
        error_type: Exception class name for failed attempts
        status_code: HTTP status of the failure, when there was one
    """

    attempt: int
    max_attempts: int
    classification: FailureKind
    delay_ms: float | None = None
    hinted: bool = False
    error_type: str | None = None
    status_code: int | None = None


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """Parse a ``Retry-After`` header into seconds.

    Accepts a (possibly fractional) number of seconds or an HTTP date.
    Returns None for a missing, negative or unparseable value.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        seconds = float(text)
    except ValueError:
        try:
            when = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None
        if when.tzinfo is None:
            when = when.replace(tzinfo=UTC)
        reference = now or datetime.now(UTC)
        return max(0.0, (when - reference).total_seconds())
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds


def _classify_status(status: int, exc: BaseException, retry_after: float | None):
    if status == 429:
        hint_ms = retry_after * 1000.0 if retry_after is not None else None
        return RetryableFailure(exc, suggested_delay_ms=hint_ms)
    if status >= 500:
        return RetryableFailure(exc)
    return FatalFailure(exc)


def classify_failure(exc: BaseException) -> RetryableFailure | FatalFailure:
    """Classify an exception raised by an attempt.

    - HTTP 429 and 5xx are retryable; a 429 wait hint is carried along.
    - Any other HTTP status is fatal.
    - Failures without an HTTP status (transport errors, timeouts) are
      retryable.
    - Everything else (programming errors, bad arguments) is fatal.
    """
    if isinstance(exc, RateLimitError):
        return _classify_status(429, exc, exc.retry_after)
    if isinstance(exc, UpstreamError):
        if exc.status_code is None:
            return RetryableFailure(exc)
        return _classify_status(exc.status_code, exc, None)
    if isinstance(exc, aiohttp.ClientResponseError):
        headers = exc.headers or {}
        return _classify_status(exc.status, exc, parse_retry_after(headers.get("Retry-After")))
    if isinstance(exc, (TransportError, aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)):
        return RetryableFailure(exc)
    return FatalFailure(exc)


def status_code_of(exc: BaseException) -> int | None:
    """HTTP status carried by an exception, if any."""
    if isinstance(exc, UpstreamError):
        return exc.status_code
    if isinstance(exc, aiohttp.ClientResponseError):
        return exc.status
    return None
