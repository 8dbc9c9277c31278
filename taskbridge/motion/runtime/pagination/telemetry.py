"""Structured logging for pagination operations.

This module provides telemetry hooks for unwrapping and cursor walking,
emitting structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import AggregationResult

logger = logging.getLogger(__name__)


def log_unrecognized_shape(*, resource_key: str, received_type: str, keys: list[str] | None) -> None:
    """Log a payload that matched neither recognized layout.

    Args:
        resource_key: Property expected to hold the items
        received_type: Python type name of the payload
        keys: Top-level keys when the payload was an object
    """
    logger.warning(
        "unwrap_unrecognized_shape",
        extra={
            "resource_key": resource_key,
            "received_type": received_type,
            "response_keys": keys,
        },
    )


def log_shape_mismatch(*, resource: str, expected: str, received: str) -> None:
    """Log a payload whose layout differs from the configured one."""
    logger.info(
        "unwrap_shape_mismatch",
        extra={"resource": resource, "expected_family": expected, "received_family": received},
    )


def log_page_size_exceeded(*, resource_key: str, item_count: int, page_size: int) -> None:
    logger.warning(
        "page_size_exceeded",
        extra={"resource_key": resource_key, "item_count": item_count, "page_size": page_size},
    )


def log_malformed_meta(*, resource_key: str, field_name: str, received_type: str) -> None:
    logger.warning(
        "page_meta_malformed",
        extra={"resource_key": resource_key, "field": field_name, "received_type": received_type},
    )


def log_page_fetched(
    *,
    resource: str,
    page_number: int,
    page_items: int,
    total_items: int,
    next_cursor: str | None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        resource: Logical resource name
        page_number: 1-based page number
        page_items: Items on this page
        total_items: Items accumulated so far
        next_cursor: Cursor reported by this page
    """
    logger.debug(
        "page_fetched",
        extra={
            "resource": resource,
            "page_number": page_number,
            "page_items": page_items,
            "total_items": total_items,
            "next_cursor": next_cursor,
        },
    )


def log_cursor_stalled(*, resource: str, cursor: str, pages_fetched: int) -> None:
    """Log an upstream that returned the cursor it was just given."""
    logger.warning(
        "cursor_stalled",
        extra={"resource": resource, "cursor": cursor, "pages_fetched": pages_fetched},
    )


def log_pagination_complete(*, resource: str, result: AggregationResult) -> None:
    """Log completion of a pagination run.

    Truncated runs log at WARNING so capped listings are visible.
    """
    level = logging.WARNING if result.truncated else logging.INFO
    logger.log(
        level,
        "pagination_complete",
        extra={
            "resource": resource,
            "pages_fetched": result.pages_fetched,
            "total_items": result.total_items,
            "truncated": result.truncated,
            "truncation_reason": result.truncation_reason.value,
            "cursor_stalled": result.cursor_stalled,
        },
    )


def log_page_error(
    *, resource: str, page_number: int, cursor: str | None, error_type: str, error_message: str
) -> None:
    """Log a page fetch that failed after retries.

    Args:
        resource: Logical resource name
        page_number: 1-based number of the page that failed
        cursor: Cursor that was requested
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "page_error",
        extra={
            "resource": resource,
            "page_number": page_number,
            "cursor": cursor,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
