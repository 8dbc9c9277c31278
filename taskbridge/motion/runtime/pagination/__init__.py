"""Cursor pagination and response unwrapping.

This module provides reusable pagination logic for Motion list endpoints,
whichever of the two response layouts they use.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page and result structures (PageMeta, UnwrappedPage,
      PaginationLimits, AggregationResult, ResourceShape)
    - unwrapping.py: Shape-agnostic unwrapping of raw responses
    - aggregator.py: Sequential cursor walking with safety limits
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .aggregator import PageFetcher, PaginationAggregator, collect_all
from .definitions import (
    AggregationResult,
    PageMeta,
    PaginationLimits,
    ResourceShape,
    UnwrappedPage,
)
from .unwrapping import ResponseUnwrapper, unwrap

__all__ = [
    "PageMeta",
    "UnwrappedPage",
    "PaginationLimits",
    "AggregationResult",
    "ResourceShape",
    "PageFetcher",
    "PaginationAggregator",
    "collect_all",
    "ResponseUnwrapper",
    "unwrap",
]
