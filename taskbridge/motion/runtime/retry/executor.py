"""Retry execution for single outbound calls.

This module provides the RetryExecutor class that runs one operation up to
``policy.max_attempts`` times, sleeping between attempts according to the
policy or to an upstream wait hint.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ...core.exceptions import DeadlineExceededError
from .outcomes import (
    AttemptEvent,
    AttemptOutcome,
    FatalFailure,
    RetryableFailure,
    Success,
    classify_failure,
    status_code_of,
)
from .policy import RetryPolicy
from .telemetry import (
    log_attempt,
    log_deadline_exceeded,
    log_retry_aborted,
    log_retry_exhausted,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

AttemptListener = Callable[[AttemptEvent], Any]


class RetryExecutor:
    """Runs an operation with bounded retries.

    The executor itself holds only configuration; each call to ``run`` or
    ``execute`` keeps its attempt counter and delays in local state, so one
    executor may serve concurrent calls.
    """

    def __init__(
        self,
        policy: RetryPolicy,
        *,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
        rng: random.Random | None = None,
        listeners: list[AttemptListener] | None = None,
    ) -> None:
        """Initialize retry executor.

        Args:
            policy: Retry policy applied to every call
            sleep: Coroutine used to wait between attempts (seconds)
            rng: Random source for jitter
            listeners: Callables receiving an AttemptEvent per attempt
        """
        self._policy = policy
        self._sleep = sleep or asyncio.sleep
        self._rng = rng or random.Random()
        self._listeners: list[AttemptListener] = list(listeners or [])

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def add_listener(self, listener: AttemptListener) -> None:
        """Register a callable notified after every attempt."""
        self._listeners.append(listener)

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        operation_id: str = "unknown",
        timeout: float | None = None,
    ) -> T:
        """Run ``operation`` and return its value.

        Args:
            operation: Zero-argument coroutine function issuing one call
            operation_id: Identifier used in logs and events
            timeout: Optional per-call deadline in seconds covering every
                attempt and every delay

        Returns:
            The value of the first successful attempt

        Raises:
            The cause of the last failed attempt, unchanged, when the attempt
            was fatal or the attempt budget ran out.
            DeadlineExceededError: If ``timeout`` expired first
        """
        outcome = await self.run(operation, operation_id=operation_id, timeout=timeout)
        if isinstance(outcome, Success):
            return outcome.value
        raise outcome.cause

    async def run(
        self,
        operation: Callable[[], Awaitable[Any]],
        *,
        operation_id: str = "unknown",
        timeout: float | None = None,
    ) -> AttemptOutcome:
        """Run ``operation`` and return the final tagged outcome.

        Failures of the operation never raise from here; only an expired
        deadline does.
        """
        if timeout is None:
            return await self._run(operation, operation_id)
        try:
            async with asyncio.timeout(timeout):
                return await self._run(operation, operation_id)
        except TimeoutError as exc:
            log_deadline_exceeded(operation_id=operation_id, timeout=timeout)
            raise DeadlineExceededError(
                f"{operation_id} did not complete within {timeout}s", timeout=timeout
            ) from exc

    async def _run(
        self, operation: Callable[[], Awaitable[Any]], operation_id: str
    ) -> AttemptOutcome:
        max_attempts = self._policy.max_attempts
        outcome: AttemptOutcome | None = None
        delay_ms = 0.0

        for attempt in range(1, max_attempts + 1):
            if attempt > 1:
                await self._sleep(delay_ms / 1000.0)

            outcome = await self._attempt(operation)

            if isinstance(outcome, Success):
                self._emit(operation_id, AttemptEvent(attempt, max_attempts, outcome.kind))
                return outcome

            error_type = type(outcome.cause).__name__
            status_code = status_code_of(outcome.cause)

            if isinstance(outcome, FatalFailure):
                self._emit(
                    operation_id,
                    AttemptEvent(
                        attempt,
                        max_attempts,
                        outcome.kind,
                        error_type=error_type,
                        status_code=status_code,
                    ),
                )
                log_retry_aborted(
                    operation_id=operation_id,
                    attempt=attempt,
                    error_type=error_type,
                    status_code=status_code,
                )
                return outcome

            if attempt == max_attempts:
                self._emit(
                    operation_id,
                    AttemptEvent(
                        attempt,
                        max_attempts,
                        outcome.kind,
                        error_type=error_type,
                        status_code=status_code,
                    ),
                )
                log_retry_exhausted(
                    operation_id=operation_id, attempts=attempt, error_type=error_type
                )
                return outcome

            delay_ms = self.next_delay_ms(attempt + 1, outcome)
            self._emit(
                operation_id,
                AttemptEvent(
                    attempt,
                    max_attempts,
                    outcome.kind,
                    delay_ms=delay_ms,
                    hinted=outcome.suggested_delay_ms is not None,
                    error_type=error_type,
                    status_code=status_code,
                ),
            )

        # max_attempts >= 1 guarantees the loop assigned an outcome
        assert outcome is not None
        return outcome

    async def _attempt(self, operation: Callable[[], Awaitable[Any]]) -> AttemptOutcome:
        try:
            value = await operation()
        except Exception as exc:
            return classify_failure(exc)
        return Success(value)

    def next_delay_ms(self, attempt: int, failure: RetryableFailure) -> float:
        """Delay before ``attempt`` following a retryable ``failure``.

        An upstream wait hint is used verbatim; otherwise the policy's
        backoff plus uniform jitter in ``[0, jitter_ms]``.
        """
        if failure.suggested_delay_ms is not None:
            return failure.suggested_delay_ms
        jitter = self._rng.uniform(0, self._policy.jitter_ms) if self._policy.jitter_ms else 0.0
        return self._policy.backoff_ms(attempt) + jitter

    def _emit(self, operation_id: str, event: AttemptEvent) -> None:
        log_attempt(operation_id=operation_id, event=event)
        for listener in self._listeners:
            try:
                listener(event)
            except Exception:
                logger.warning(
                    "attempt_listener_failed",
                    exc_info=True,
                    extra={"operation_id": operation_id, "attempt": event.attempt},
                )


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    operation_id: str = "unknown",
    timeout: float | None = None,
) -> T:
    """Convenience wrapper: ``RetryExecutor(policy).execute(operation)``."""
    return await RetryExecutor(policy).execute(
        operation, operation_id=operation_id, timeout=timeout
    )


__all__ = ["RetryExecutor", "execute_with_retry"]
