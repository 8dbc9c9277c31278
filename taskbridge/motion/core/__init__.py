"""Core components."""

from .enums import FailureKind, ShapeFamily, TruncationReason
from .exceptions import (
    ClientError,
    ConfigurationError,
    DeadlineExceededError,
    MotionError,
    RateLimitError,
    ServerError,
    TransportError,
    UpstreamError,
)

__all__ = [
    "FailureKind",
    "ShapeFamily",
    "TruncationReason",
    "MotionError",
    "UpstreamError",
    "RateLimitError",
    "ServerError",
    "ClientError",
    "TransportError",
    "DeadlineExceededError",
    "ConfigurationError",
]
