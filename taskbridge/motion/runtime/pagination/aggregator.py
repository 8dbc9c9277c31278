"""Cursor pagination driver.

This module provides the PaginationAggregator class that walks a
cursor-paginated resource page by page, accumulating items until the
upstream is exhausted or a safety limit fires.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ...core.enums import TruncationReason
from .definitions import AggregationResult, PaginationLimits, UnwrappedPage
from .telemetry import (
    log_cursor_stalled,
    log_page_error,
    log_page_fetched,
    log_pagination_complete,
)

PageFetcher = Callable[[str | None], Awaitable[UnwrappedPage[Any]]]


class PaginationAggregator:
    """Collects every page of a cursor-paginated resource.

    Pages are fetched strictly one after another: the cursor for page N+1 is
    only known once page N has arrived. After each page the aggregator
    checks, in order:

    1. no next cursor: the resource is exhausted
    2. ``max_pages`` reached: truncated (page_limit)
    3. ``max_items`` reached: truncated (item_limit)
    4. next cursor equals the cursor just requested: stop without
       truncation, keeping everything collected so far

    Only a configured cap marks the result truncated.
    """

    def __init__(self, limits: PaginationLimits | None = None) -> None:
        """Initialize pagination aggregator.

        Args:
            limits: Safety caps (defaults to PaginationLimits())
        """
        self._limits = limits or PaginationLimits()

    @property
    def limits(self) -> PaginationLimits:
        return self._limits

    async def collect(
        self,
        fetch_page: PageFetcher,
        *,
        resource: str = "unknown",
        transform: Callable[[Any], Any] | None = None,
    ) -> AggregationResult[Any]:
        """Fetch pages until exhaustion or a limit.

        Args:
            fetch_page: Async function taking the cursor to request (None for
                the first page) and returning an UnwrappedPage
            resource: Logical resource name used in logs
            transform: Optional function applied to every item

        Returns:
            AggregationResult with items in upstream page order

        Raises:
            Whatever ``fetch_page`` raises; the failure is logged first.
        """
        limits = self._limits
        result: AggregationResult[Any] = AggregationResult()
        cursor: str | None = None

        while True:
            page_number = result.pages_fetched + 1
            try:
                page = await fetch_page(cursor)
            except Exception as e:
                log_page_error(
                    resource=resource,
                    page_number=page_number,
                    cursor=cursor,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            items = page.items if transform is None else [transform(item) for item in page.items]
            result.items.extend(items)
            result.pages_fetched = page_number
            next_cursor = page.next_cursor

            log_page_fetched(
                resource=resource,
                page_number=page_number,
                page_items=len(items),
                total_items=len(result.items),
                next_cursor=next_cursor,
            )

            if next_cursor is None:
                break

            if result.pages_fetched >= limits.max_pages:
                self._truncate(result, TruncationReason.PAGE_LIMIT, next_cursor)
                break

            if len(result.items) >= limits.max_items:
                self._truncate(result, TruncationReason.ITEM_LIMIT, next_cursor)
                break

            if next_cursor == cursor:
                result.cursor_stalled = True
                log_cursor_stalled(
                    resource=resource, cursor=next_cursor, pages_fetched=result.pages_fetched
                )
                break

            cursor = next_cursor

        log_pagination_complete(resource=resource, result=result)
        return result

    @staticmethod
    def _truncate(
        result: AggregationResult[Any], reason: TruncationReason, next_cursor: str
    ) -> None:
        result.truncated = True
        result.truncation_reason = reason
        result.next_cursor = next_cursor


async def collect_all(
    fetch_page: PageFetcher,
    limits: PaginationLimits | None = None,
    *,
    resource: str = "unknown",
    transform: Callable[[Any], Any] | None = None,
) -> AggregationResult[Any]:
    """Convenience wrapper: ``PaginationAggregator(limits).collect(fetch_page)``."""
    return await PaginationAggregator(limits).collect(
        fetch_page, resource=resource, transform=transform
    )
