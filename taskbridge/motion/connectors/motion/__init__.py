"""Motion connector: configuration, endpoint registry and REST access."""

from .config import (
    BASE_URL,
    DEFAULT_LIMITS,
    DEFAULT_RETRY_POLICY,
    RESOURCE_SHAPES,
    MotionConfig,
    resource_key_for,
    supports_pagination,
)
from .rest import MotionRESTConnector

__all__ = [
    "BASE_URL",
    "DEFAULT_LIMITS",
    "DEFAULT_RETRY_POLICY",
    "RESOURCE_SHAPES",
    "MotionConfig",
    "MotionRESTConnector",
    "resource_key_for",
    "supports_pagination",
]
