"""Structured logging for retry operations."""

from __future__ import annotations

import logging

from .outcomes import AttemptEvent

logger = logging.getLogger(__name__)


def log_attempt(*, operation_id: str, event: AttemptEvent) -> None:
    """Log a single attempt and the delay scheduled after it.

    Args:
        operation_id: Identifier of the wrapped operation (endpoint id)
        event: Attempt record
    """
    level = logging.DEBUG if event.error_type is None else logging.INFO
    logger.log(
        level,
        "retry_attempt",
        extra={
            "operation_id": operation_id,
            "attempt": event.attempt,
            "max_attempts": event.max_attempts,
            "classification": event.classification.value,
            "delay_ms": round(event.delay_ms, 1) if event.delay_ms is not None else None,
            "hinted": event.hinted,
            "error_type": event.error_type,
            "status_code": event.status_code,
        },
    )


def log_retry_exhausted(*, operation_id: str, attempts: int, error_type: str) -> None:
    """Log that every attempt failed with a retryable error.

    Args:
        operation_id: Identifier of the wrapped operation
        attempts: Number of attempts made
        error_type: Class name of the last failure
    """
    logger.warning(
        "retry_exhausted",
        extra={
            "operation_id": operation_id,
            "attempts": attempts,
            "error_type": error_type,
        },
    )


def log_retry_aborted(
    *, operation_id: str, attempt: int, error_type: str, status_code: int | None
) -> None:
    """Log a fatal failure that stops retrying immediately."""
    logger.warning(
        "retry_aborted",
        extra={
            "operation_id": operation_id,
            "attempt": attempt,
            "error_type": error_type,
            "status_code": status_code,
        },
    )


def log_deadline_exceeded(*, operation_id: str, timeout: float) -> None:
    logger.warning(
        "retry_deadline_exceeded",
        extra={"operation_id": operation_id, "timeout": timeout},
    )
