"""taskbridge.motion - resilient access layer for the Motion task-management API."""

from .connectors import MotionConfig, MotionRESTConnector
from .core import (
    ClientError,
    ConfigurationError,
    DeadlineExceededError,
    MotionError,
    RateLimitError,
    ServerError,
    ShapeFamily,
    TransportError,
    TruncationReason,
    UpstreamError,
)
from .models import NormalizedStatus
from .normalize import (
    normalize_duration,
    normalize_labels,
    normalize_record,
    normalize_status,
)
from .runtime import (
    AggregationResult,
    AttemptEvent,
    FatalFailure,
    PageMeta,
    PaginationAggregator,
    PaginationLimits,
    ResourceShape,
    ResponseUnwrapper,
    RetryableFailure,
    RetryExecutor,
    RetryPolicy,
    Success,
    UnwrappedPage,
    classify_failure,
    unwrap,
)

__all__ = [
    # Connector
    "MotionConfig",
    "MotionRESTConnector",
    # Retry
    "RetryPolicy",
    "RetryExecutor",
    "AttemptEvent",
    "Success",
    "RetryableFailure",
    "FatalFailure",
    "classify_failure",
    # Pagination
    "PageMeta",
    "UnwrappedPage",
    "PaginationLimits",
    "AggregationResult",
    "ResourceShape",
    "PaginationAggregator",
    "ResponseUnwrapper",
    "unwrap",
    # Normalization
    "NormalizedStatus",
    "normalize_status",
    "normalize_duration",
    "normalize_labels",
    "normalize_record",
    # Enums
    "ShapeFamily",
    "TruncationReason",
    # Exceptions
    "MotionError",
    "UpstreamError",
    "RateLimitError",
    "ServerError",
    "ClientError",
    "TransportError",
    "DeadlineExceededError",
    "ConfigurationError",
]
