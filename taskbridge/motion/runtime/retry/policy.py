"""Retry policy definition.

A policy is built once at the composition root (see
``connectors.motion.config``) and threaded through every call. It is frozen,
so executors running concurrently can share one instance safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff with additive jitter.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        base_delay_ms: Delay before the second attempt, before jitter (> 0)
        backoff_multiplier: Growth factor between consecutive delays (>= 1)
        max_delay_ms: Ceiling applied to the computed delay, before jitter
        jitter_ms: Upper bound of the uniform random delay added on top
    """

    max_attempts: int = 3
    base_delay_ms: float = 1000.0
    backoff_multiplier: float = 2.0
    max_delay_ms: float = 30000.0
    jitter_ms: float = 250.0

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.max_attempts < 1:
            raise ValueError("RetryPolicy max_attempts must be >= 1")
        if self.base_delay_ms <= 0:
            raise ValueError("RetryPolicy base_delay_ms must be > 0")
        if self.backoff_multiplier < 1:
            raise ValueError("RetryPolicy backoff_multiplier must be >= 1")
        if self.max_delay_ms < 0:
            raise ValueError("RetryPolicy max_delay_ms must be >= 0")
        if self.jitter_ms < 0:
            raise ValueError("RetryPolicy jitter_ms must be >= 0")

    def backoff_ms(self, attempt: int) -> float:
        """Computed delay before ``attempt`` (1-based), excluding jitter.

        The first attempt runs immediately. For attempt n >= 2 the delay is
        ``min(max_delay_ms, base_delay_ms * backoff_multiplier ** (n - 2))``.

        Args:
            attempt: Attempt number the delay precedes

        Returns:
            Delay in milliseconds
        """
        if attempt < 2:
            return 0.0
        return min(self.max_delay_ms, self.base_delay_ms * self.backoff_multiplier ** (attempt - 2))

    @classmethod
    def no_retry(cls) -> RetryPolicy:
        """Policy performing exactly one attempt."""
        return cls(max_attempts=1)
