"""Bounded retries with exponential backoff for outbound calls.

Architecture:
    - policy.py: Immutable RetryPolicy (attempt budget, backoff, jitter)
    - outcomes.py: Tagged attempt outcomes and failure classification
    - executor.py: RetryExecutor driving attempts and delays
    - telemetry.py: Structured per-attempt logging
"""

from __future__ import annotations

from .executor import AttemptListener, RetryExecutor, execute_with_retry
from .outcomes import (
    AttemptEvent,
    AttemptOutcome,
    FatalFailure,
    RetryableFailure,
    Success,
    classify_failure,
    parse_retry_after,
)
from .policy import RetryPolicy

__all__ = [
    "RetryPolicy",
    "RetryExecutor",
    "AttemptListener",
    "execute_with_retry",
    "AttemptEvent",
    "AttemptOutcome",
    "Success",
    "RetryableFailure",
    "FatalFailure",
    "classify_failure",
    "parse_retry_after",
]
