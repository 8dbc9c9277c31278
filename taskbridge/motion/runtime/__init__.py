"""Runtime orchestration components: retries, pagination, REST."""

from .pagination import (
    AggregationResult,
    PageMeta,
    PaginationAggregator,
    PaginationLimits,
    ResourceShape,
    ResponseUnwrapper,
    UnwrappedPage,
    unwrap,
)
from .retry import (
    AttemptEvent,
    FatalFailure,
    RetryableFailure,
    RetryExecutor,
    RetryPolicy,
    Success,
    classify_failure,
)

__all__ = [
    "RetryPolicy",
    "RetryExecutor",
    "AttemptEvent",
    "Success",
    "RetryableFailure",
    "FatalFailure",
    "classify_failure",
    "PageMeta",
    "UnwrappedPage",
    "PaginationLimits",
    "AggregationResult",
    "ResourceShape",
    "PaginationAggregator",
    "ResponseUnwrapper",
    "unwrap",
]
