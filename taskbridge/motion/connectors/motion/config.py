"""Shared Motion connector configuration.

This module centralizes the base URL, default retry and pagination settings,
and the per-resource response shape table, so the connector can stay small
and focused. ``MotionConfig`` is the composition root: build one, and every
request made through the connector uses its policy and limits.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from taskbridge.motion.core import ConfigurationError, ShapeFamily
from taskbridge.motion.runtime.pagination import PaginationLimits, ResourceShape
from taskbridge.motion.runtime.retry import RetryPolicy

BASE_URL = "https://api.usemotion.com/v1"

API_KEY_ENV = "MOTION_API_KEY"
BASE_URL_ENV = "MOTION_BASE_URL"
TIMEOUT_ENV = "MOTION_TIMEOUT"

DEFAULT_TIMEOUT = 30.0

DEFAULT_RETRY_POLICY = RetryPolicy(
    max_attempts=3,
    base_delay_ms=1000.0,
    backoff_multiplier=2.0,
    max_delay_ms=30000.0,
    jitter_ms=250.0,
)

DEFAULT_LIMITS = PaginationLimits(max_pages=10, max_items=1000)

# Response layout per logical resource.
# Wrapped: {"meta": {"nextCursor", "pageSize"}, "<resource_key>": [...]}
# Bare: [...]
RESOURCE_SHAPES: dict[str, ResourceShape] = {
    "tasks": ResourceShape("tasks"),
    "projects": ResourceShape("projects"),
    "comments": ResourceShape("comments"),
    # recurring tasks come back under "tasks", not "recurringTasks"
    "recurring-tasks": ResourceShape("tasks"),
    "custom-fields": ResourceShape("customFields"),
    "schedules": ResourceShape("schedules", ShapeFamily.BARE),
    "statuses": ResourceShape("statuses", ShapeFamily.BARE),
    "workspaces": ResourceShape("workspaces", ShapeFamily.BARE),
    "users": ResourceShape("users", ShapeFamily.BARE),
}


def supports_pagination(resource: str) -> bool:
    """Whether ``resource`` is documented as cursor-paginated."""
    shape = RESOURCE_SHAPES.get(resource)
    return shape.paginated if shape else False


def resource_key_for(resource: str) -> str | None:
    """Property holding the items of a wrapped ``resource`` response."""
    shape = RESOURCE_SHAPES.get(resource)
    return shape.resource_key if shape and shape.paginated else None


@dataclass(frozen=True)
class MotionConfig:
    """Connector configuration.

    Attributes:
        api_key: Motion API key sent as ``X-API-Key``
        base_url: API root
        timeout: Per-request HTTP timeout in seconds
        retry_policy: Retry policy applied to every request
        limits: Default pagination caps for list operations
    """

    api_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retry_policy: RetryPolicy = field(default=DEFAULT_RETRY_POLICY)
    limits: PaginationLimits = field(default=DEFAULT_LIMITS)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("Motion API key is required")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be > 0")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides) -> MotionConfig:
        """Build configuration from environment variables.

        Reads ``MOTION_API_KEY`` (required), ``MOTION_BASE_URL`` and
        ``MOTION_TIMEOUT``. Keyword overrides win over the environment.

        Raises:
            ConfigurationError: If the API key is missing or the timeout is
                not a number
        """
        env = os.environ if environ is None else environ
        api_key = overrides.pop("api_key", None) or env.get(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

        kwargs: dict = {"api_key": api_key}
        if env.get(BASE_URL_ENV):
            kwargs["base_url"] = env[BASE_URL_ENV]
        if env.get(TIMEOUT_ENV):
            try:
                kwargs["timeout"] = float(env[TIMEOUT_ENV])
            except ValueError as e:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV} must be a number, got {env[TIMEOUT_ENV]!r}"
                ) from e
        kwargs.update(overrides)
        return cls(**kwargs)
