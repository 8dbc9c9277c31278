"""Unit tests for failure classification and wait-hint parsing."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from taskbridge.motion.core import (
    ClientError,
    RateLimitError,
    ServerError,
    TransportError,
    UpstreamError,
)
from taskbridge.motion.runtime.retry import (
    FatalFailure,
    RetryableFailure,
    RetryPolicy,
    classify_failure,
    parse_retry_after,
)


class TestClassifyFailure:
    """Test retryable/fatal classification."""

    @pytest.mark.parametrize("status", [500, 502, 503, 504])
    def test_server_errors_retryable(self, status):
        outcome = classify_failure(ServerError("down", status_code=status))
        assert isinstance(outcome, RetryableFailure)
        assert outcome.suggested_delay_ms is None

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 422])
    def test_client_errors_fatal(self, status):
        outcome = classify_failure(ClientError("rejected", status_code=status))
        assert isinstance(outcome, FatalFailure)

    def test_rate_limit_carries_hint(self):
        """Test 429 hint is converted to milliseconds."""
        outcome = classify_failure(RateLimitError("slow down", retry_after=1.5))
        assert isinstance(outcome, RetryableFailure)
        assert outcome.suggested_delay_ms == pytest.approx(1500.0)

    def test_rate_limit_without_hint(self):
        outcome = classify_failure(RateLimitError("slow down"))
        assert isinstance(outcome, RetryableFailure)
        assert outcome.suggested_delay_ms is None

    def test_upstream_error_without_status_retryable(self):
        assert isinstance(classify_failure(UpstreamError("no status")), RetryableFailure)

    def test_transport_and_timeout_retryable(self):
        assert isinstance(classify_failure(TransportError("reset")), RetryableFailure)
        assert isinstance(classify_failure(asyncio.TimeoutError()), RetryableFailure)
        assert isinstance(classify_failure(ConnectionResetError()), RetryableFailure)

    def test_other_exceptions_fatal(self):
        assert isinstance(classify_failure(ValueError("bad")), FatalFailure)

    def test_cause_preserved(self):
        error = ServerError("down", status_code=500)
        assert classify_failure(error).cause is error


class TestParseRetryAfter:
    """Test Retry-After parsing."""

    def test_integer_seconds(self):
        assert parse_retry_after("1") == 1.0

    def test_fractional_seconds(self):
        assert parse_retry_after(" 0.25 ") == 0.25

    def test_http_date(self):
        now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        assert parse_retry_after("Mon, 01 Jan 2024 12:00:30 GMT", now=now) == pytest.approx(30.0)

    def test_past_http_date_clamped_to_zero(self):
        now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        assert parse_retry_after("Mon, 01 Jan 2024 11:00:00 GMT", now=now) == 0.0

    @pytest.mark.parametrize("value", [None, "", "soon", "-5", "nan"])
    def test_unusable_values(self, value):
        assert parse_retry_after(value) is None


class TestRetryPolicy:
    """Test RetryPolicy validation and backoff."""

    def test_backoff_sequence(self):
        policy = RetryPolicy(base_delay_ms=100.0, backoff_multiplier=3.0, max_delay_ms=1000.0)
        assert [policy.backoff_ms(n) for n in range(1, 6)] == [0.0, 100.0, 300.0, 900.0, 1000.0]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_attempts": 0},
            {"base_delay_ms": 0},
            {"backoff_multiplier": 0.5},
            {"max_delay_ms": -1},
            {"jitter_ms": -1},
        ],
    )
    def test_invalid_policy_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)

    def test_no_retry(self):
        assert RetryPolicy.no_retry().max_attempts == 1

    def test_policy_is_immutable(self):
        policy = RetryPolicy()
        with pytest.raises(AttributeError):
            policy.max_attempts = 10  # type: ignore[misc]
