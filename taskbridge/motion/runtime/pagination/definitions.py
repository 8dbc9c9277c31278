"""Pagination metadata definitions and result structures.

This module defines the data structures used to describe a single unwrapped
page, the safety limits applied while walking cursors, and the aggregated
result handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ...core.enums import ShapeFamily, TruncationReason

T = TypeVar("T")


@dataclass(frozen=True)
class PageMeta:
    """Pagination metadata surfaced from a wrapped response.

    Attributes:
        next_cursor: Cursor for the following page; None means exhausted
        page_size: Declared page size, when the upstream reports one
    """

    next_cursor: str | None = None
    page_size: int | None = None


@dataclass(frozen=True)
class UnwrappedPage(Generic[T]):
    """One page of items in uniform shape.

    Attributes:
        items: Items in upstream order
        meta: Pagination metadata (None for bare-array responses)
    """

    items: list[T] = field(default_factory=list)
    meta: PageMeta | None = None

    @property
    def next_cursor(self) -> str | None:
        return self.meta.next_cursor if self.meta else None


@dataclass(frozen=True)
class PaginationLimits:
    """Safety caps for cursor walking.

    Attributes:
        max_pages: Maximum number of page fetches (>= 1)
        max_items: Item count after which pagination stops; the last page is
            kept whole, so the result may exceed this by up to one page
    """

    max_pages: int = 10
    max_items: int = 1000

    def __post_init__(self) -> None:
        """Validate limits."""
        if self.max_pages < 1:
            raise ValueError("PaginationLimits max_pages must be >= 1")
        if self.max_items < 1:
            raise ValueError("PaginationLimits max_items must be >= 1")


@dataclass
class AggregationResult(Generic[T]):
    """Result of walking every page of a resource.

    Attributes:
        items: Items from all fetched pages, in page order
        truncated: True only when a configured cap stopped pagination
        truncation_reason: Which cap fired (NONE when not truncated)
        pages_fetched: Number of page fetches issued
        next_cursor: Cursor to resume from when truncated, else None
        cursor_stalled: True when the upstream repeated the requested cursor
            and pagination was stopped to avoid looping
    """

    items: list[T] = field(default_factory=list)
    truncated: bool = False
    truncation_reason: TruncationReason = TruncationReason.NONE
    pages_fetched: int = 0
    next_cursor: str | None = None
    cursor_stalled: bool = False

    @property
    def total_items(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class ResourceShape:
    """Configured response layout for one logical resource.

    Attributes:
        resource_key: Property holding the item array in wrapped responses
        family: Expected shape family
    """

    resource_key: str
    family: ShapeFamily = ShapeFamily.WRAPPED

    @property
    def paginated(self) -> bool:
        return self.family == ShapeFamily.WRAPPED

