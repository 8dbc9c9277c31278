"""Enumerations shared across the access layer."""

from __future__ import annotations

from enum import Enum


class ShapeFamily(str, Enum):
    """Recognized JSON layouts for list responses."""

    WRAPPED = "wrapped"  # {"meta": {...}, "<resource_key>": [...]}
    BARE = "bare"  # [...]
    UNKNOWN = "unknown"

    @classmethod
    def detect(cls, raw: object, resource_key: str | None = None) -> ShapeFamily:
        """Classify a payload by structure alone."""
        if isinstance(raw, list):
            return cls.BARE
        if isinstance(raw, dict) and resource_key and isinstance(raw.get(resource_key), list):
            return cls.WRAPPED
        return cls.UNKNOWN


class TruncationReason(str, Enum):
    """Why pagination stopped before the upstream was exhausted."""

    NONE = "none"
    PAGE_LIMIT = "page_limit"
    ITEM_LIMIT = "item_limit"


class FailureKind(str, Enum):
    """Classification of a single attempt."""

    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"
