"""Unit tests for Motion connector configuration."""

import pytest

from taskbridge.motion.connectors.motion import (
    BASE_URL,
    DEFAULT_LIMITS,
    DEFAULT_RETRY_POLICY,
    RESOURCE_SHAPES,
    MotionConfig,
)
from taskbridge.motion.connectors.motion.config import resource_key_for, supports_pagination
from taskbridge.motion.core import ConfigurationError, ShapeFamily


class TestMotionConfig:
    """Test MotionConfig construction and validation."""

    def test_defaults(self):
        config = MotionConfig(api_key="key")

        assert config.base_url == BASE_URL
        assert config.timeout == 30.0
        assert config.retry_policy == DEFAULT_RETRY_POLICY
        assert config.retry_policy.max_attempts == 3
        assert config.retry_policy.base_delay_ms == 1000.0
        assert config.limits == DEFAULT_LIMITS

    def test_empty_api_key_rejected(self):
        with pytest.raises(ConfigurationError):
            MotionConfig(api_key="")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ConfigurationError):
            MotionConfig(api_key="key", timeout=0)

    def test_from_env(self):
        config = MotionConfig.from_env(
            {
                "MOTION_API_KEY": "env-key",
                "MOTION_BASE_URL": "http://localhost:8080/v1",
                "MOTION_TIMEOUT": "5",
            }
        )

        assert config.api_key == "env-key"
        assert config.base_url == "http://localhost:8080/v1"
        assert config.timeout == 5.0

    def test_from_env_overrides_win(self):
        config = MotionConfig.from_env({"MOTION_API_KEY": "env-key"}, api_key="explicit", timeout=2.0)

        assert config.api_key == "explicit"
        assert config.timeout == 2.0

    def test_from_env_missing_key(self):
        with pytest.raises(ConfigurationError, match="MOTION_API_KEY"):
            MotionConfig.from_env({})

    def test_from_env_bad_timeout(self):
        with pytest.raises(ConfigurationError, match="MOTION_TIMEOUT"):
            MotionConfig.from_env({"MOTION_API_KEY": "k", "MOTION_TIMEOUT": "soon"})


class TestResourceShapes:
    """Test the per-resource response shape table."""

    def test_recurring_tasks_wrapped_under_tasks(self):
        assert resource_key_for("recurring-tasks") == "tasks"

    def test_custom_fields_key(self):
        assert resource_key_for("custom-fields") == "customFields"

    @pytest.mark.parametrize("resource", ["schedules", "statuses", "workspaces", "users"])
    def test_bare_resources(self, resource):
        assert RESOURCE_SHAPES[resource].family == ShapeFamily.BARE
        assert supports_pagination(resource) is False
        assert resource_key_for(resource) is None

    @pytest.mark.parametrize("resource", ["tasks", "projects", "comments", "recurring-tasks"])
    def test_paginated_resources(self, resource):
        assert supports_pagination(resource) is True

    def test_unknown_resource(self):
        assert supports_pagination("labels") is False
        assert resource_key_for("labels") is None
