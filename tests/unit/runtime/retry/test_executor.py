"""Unit tests for RetryExecutor.

Tests use an injected sleep so delays are recorded instead of waited on.
"""

from __future__ import annotations

import asyncio
import random
from unittest.mock import MagicMock

import aiohttp
import pytest

from taskbridge.motion.core import (
    ClientError,
    DeadlineExceededError,
    FailureKind,
    RateLimitError,
    ServerError,
    TransportError,
)
from taskbridge.motion.runtime.retry import (
    AttemptEvent,
    FatalFailure,
    RetryableFailure,
    RetryExecutor,
    RetryPolicy,
    Success,
    execute_with_retry,
)


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def scripted(*results):
    """Operation returning/raising the given results in order."""
    calls = {"count": 0}
    remaining = list(results)

    async def operation():
        calls["count"] += 1
        result = remaining.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    return operation, calls


NO_JITTER = RetryPolicy(
    max_attempts=4, base_delay_ms=100.0, backoff_multiplier=2.0, max_delay_ms=1000.0, jitter_ms=0
)


class TestRetryExecutorClassification:
    """Test which failures are retried."""

    @pytest.mark.asyncio
    async def test_success_first_attempt(self):
        """Test a successful operation runs once with no delay."""
        sleep = RecordingSleep()
        operation, calls = scripted({"ok": True})

        result = await RetryExecutor(NO_JITTER, sleep=sleep).execute(operation)

        assert result == {"ok": True}
        assert calls["count"] == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_client_error_single_attempt(self):
        """Test a 404 is fatal: exactly one attempt, error propagated."""
        sleep = RecordingSleep()
        error = ClientError("not found", status_code=404)
        operation, calls = scripted(error, {"unused": True})

        with pytest.raises(ClientError) as exc_info:
            await RetryExecutor(NO_JITTER, sleep=sleep).execute(operation)

        assert exc_info.value is error
        assert calls["count"] == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_unexpected_exception_not_retried(self):
        """Test programming errors are fatal."""
        operation, calls = scripted(KeyError("task_id"))

        with pytest.raises(KeyError):
            await RetryExecutor(NO_JITTER, sleep=RecordingSleep()).execute(operation)

        assert calls["count"] == 1

    @pytest.mark.asyncio
    async def test_transport_errors_retried(self):
        """Test failures without an HTTP status are retried."""
        operation, calls = scripted(
            TransportError("connection reset"),
            aiohttp.ClientConnectionError("refused"),
            asyncio.TimeoutError(),
            "done",
        )

        result = await RetryExecutor(NO_JITTER, sleep=RecordingSleep()).execute(operation)

        assert result == "done"
        assert calls["count"] == 4


class TestRetryExecutorBackoff:
    """Test delay computation between attempts."""

    @pytest.mark.asyncio
    async def test_repeated_503_exhausts_attempts(self):
        """Test repeated 503s use every attempt with non-decreasing delays."""
        sleep = RecordingSleep()
        errors = [ServerError("unavailable", status_code=503) for _ in range(4)]
        operation, calls = scripted(*errors)

        with pytest.raises(ServerError) as exc_info:
            await RetryExecutor(NO_JITTER, sleep=sleep).execute(operation)

        assert calls["count"] == 4
        # Last failure propagates unchanged
        assert exc_info.value is errors[-1]
        assert sleep.delays == pytest.approx([0.1, 0.2, 0.4])
        assert sleep.delays == sorted(sleep.delays)

    @pytest.mark.asyncio
    async def test_delay_capped_at_max(self):
        """Test computed delay never exceeds max_delay_ms."""
        policy = RetryPolicy(
            max_attempts=4,
            base_delay_ms=1000.0,
            backoff_multiplier=10.0,
            max_delay_ms=5000.0,
            jitter_ms=0,
        )
        sleep = RecordingSleep()
        operation, _ = scripted(*[ServerError("down", status_code=500) for _ in range(3)], "ok")

        await RetryExecutor(policy, sleep=sleep).execute(operation)

        assert sleep.delays == pytest.approx([1.0, 5.0, 5.0])

    @pytest.mark.asyncio
    async def test_jitter_bounded(self):
        """Test jitter adds between 0 and jitter_ms to each delay."""
        policy = RetryPolicy(
            max_attempts=5,
            base_delay_ms=100.0,
            backoff_multiplier=2.0,
            max_delay_ms=10000.0,
            jitter_ms=50.0,
        )
        sleep = RecordingSleep()
        operation, _ = scripted(*[ServerError("down", status_code=502) for _ in range(4)], "ok")

        await RetryExecutor(policy, sleep=sleep, rng=random.Random(7)).execute(operation)

        for delay, base in zip(sleep.delays, [0.1, 0.2, 0.4, 0.8], strict=True):
            assert base <= delay <= base + 0.05

    @pytest.mark.asyncio
    async def test_rate_limit_hint_used_verbatim(self):
        """Test 429 with a wait hint of 1s: three 1000ms delays, success on attempt 4."""
        policy = RetryPolicy(
            max_attempts=4,
            base_delay_ms=100.0,
            backoff_multiplier=2.0,
            max_delay_ms=200.0,
            jitter_ms=25.0,
        )
        sleep = RecordingSleep()
        operation, calls = scripted(
            *[RateLimitError("slow down", retry_after=1.0) for _ in range(3)], {"tasks": []}
        )

        result = await RetryExecutor(policy, sleep=sleep).execute(operation)

        assert result == {"tasks": []}
        assert calls["count"] == 4
        assert sleep.delays == pytest.approx([1.0, 1.0, 1.0])

    @pytest.mark.asyncio
    async def test_rate_limit_without_hint_uses_backoff(self):
        """Test 429 without a hint falls back to computed backoff."""
        sleep = RecordingSleep()
        operation, _ = scripted(RateLimitError("slow down"), "ok")

        await RetryExecutor(NO_JITTER, sleep=sleep).execute(operation)

        assert sleep.delays == pytest.approx([0.1])

    @pytest.mark.asyncio
    async def test_aiohttp_response_error_hint(self):
        """Test Retry-After is read from a raw aiohttp 429 error."""
        sleep = RecordingSleep()
        error = aiohttp.ClientResponseError(
            request_info=MagicMock(),
            history=(),
            status=429,
            message="Too Many Requests",
            headers={"Retry-After": "2"},
        )
        operation, _ = scripted(error, "ok")

        await RetryExecutor(NO_JITTER, sleep=sleep).execute(operation)

        assert sleep.delays == pytest.approx([2.0])


class TestRetryExecutorOutcomes:
    """Test tagged outcomes and attempt events."""

    @pytest.mark.asyncio
    async def test_run_returns_tagged_outcomes(self):
        """Test run() reports outcomes instead of raising."""
        executor = RetryExecutor(NO_JITTER, sleep=RecordingSleep())

        ok, _ = scripted("value")
        fatal, _ = scripted(ClientError("bad request", status_code=400))
        exhausted, _ = scripted(*[ServerError("down", status_code=500) for _ in range(4)])

        assert await executor.run(ok) == Success("value")
        assert isinstance(await executor.run(fatal), FatalFailure)
        assert isinstance(await executor.run(exhausted), RetryableFailure)

    @pytest.mark.asyncio
    async def test_listener_receives_event_per_attempt(self):
        """Test one event per attempt with classification and scheduled delay."""
        events: list[AttemptEvent] = []
        executor = RetryExecutor(NO_JITTER, sleep=RecordingSleep(), listeners=[events.append])
        operation, _ = scripted(ServerError("down", status_code=503), "ok")

        await executor.execute(operation, operation_id="tasks")

        assert [e.attempt for e in events] == [1, 2]
        assert events[0].classification == FailureKind.RETRYABLE
        assert events[0].delay_ms == pytest.approx(100.0)
        assert events[0].status_code == 503
        assert events[1].classification == FailureKind.SUCCESS
        assert events[1].delay_ms is None

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_call(self):
        """Test listener exceptions are logged, not propagated."""

        def listener(event):
            raise RuntimeError("listener bug")

        executor = RetryExecutor(NO_JITTER, sleep=RecordingSleep(), listeners=[listener])
        operation, _ = scripted("ok")

        assert await executor.execute(operation) == "ok"


class TestRetryExecutorDeadline:
    """Test per-call deadlines."""

    @pytest.mark.asyncio
    async def test_deadline_abandons_in_flight_attempt(self):
        """Test an attempt outliving the deadline raises DeadlineExceededError."""

        async def slow():
            await asyncio.sleep(10)

        executor = RetryExecutor(NO_JITTER)

        with pytest.raises(DeadlineExceededError) as exc_info:
            await executor.execute(slow, timeout=0.05)

        assert exc_info.value.retryable is True
        assert exc_info.value.timeout == 0.05

    @pytest.mark.asyncio
    async def test_deadline_covers_backoff_delay(self):
        """Test the deadline also cancels a pending inter-attempt delay."""
        policy = RetryPolicy(max_attempts=3, base_delay_ms=10000.0, jitter_ms=0)
        operation, calls = scripted(ServerError("down", status_code=500), "ok")

        with pytest.raises(DeadlineExceededError):
            await RetryExecutor(policy).execute(operation, timeout=0.05)

        assert calls["count"] == 1


class TestExecuteWithRetry:
    """Test the module-level convenience wrapper."""

    @pytest.mark.asyncio
    async def test_retries_then_returns_value(self):
        policy = RetryPolicy(max_attempts=2, base_delay_ms=1.0, jitter_ms=0)
        operation, calls = scripted(ServerError("down", status_code=503), "ok")

        assert await execute_with_retry(operation, policy, operation_id="tasks") == "ok"
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_fatal_error_raised_unchanged(self):
        error = ClientError("Task not found", status_code=404)
        operation, calls = scripted(error)

        with pytest.raises(ClientError) as exc_info:
            await execute_with_retry(operation, RetryPolicy(jitter_ms=0))

        assert exc_info.value is error
        assert calls["count"] == 1
