"""Response unwrapping for inconsistently shaped list endpoints.

Motion list endpoints come in two layouts:

- wrapped: ``{"meta": {"nextCursor": "...", "pageSize": 50}, "tasks": [...]}``
- bare: ``[...]``

``unwrap`` turns either into an ``UnwrappedPage``, deciding purely from the
payload's structure. Which key holds the items for a given resource is
configuration (``ResourceShape``), supplied by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.enums import ShapeFamily
from .definitions import PageMeta, ResourceShape, UnwrappedPage
from .telemetry import (
    log_malformed_meta,
    log_page_size_exceeded,
    log_shape_mismatch,
    log_unrecognized_shape,
)


def _parse_meta(raw_meta: Any, resource_key: str) -> PageMeta | None:
    if not isinstance(raw_meta, dict):
        if raw_meta is not None:
            log_malformed_meta(
                resource_key=resource_key, field_name="meta", received_type=type(raw_meta).__name__
            )
        return None

    next_cursor = raw_meta.get("nextCursor")
    if next_cursor is not None and not isinstance(next_cursor, str):
        log_malformed_meta(
            resource_key=resource_key,
            field_name="nextCursor",
            received_type=type(next_cursor).__name__,
        )
        next_cursor = None
    if next_cursor == "":
        next_cursor = None

    page_size = raw_meta.get("pageSize")
    # bool is an int subclass; reject it explicitly
    if page_size is not None and (isinstance(page_size, bool) or not isinstance(page_size, int)):
        log_malformed_meta(
            resource_key=resource_key,
            field_name="pageSize",
            received_type=type(page_size).__name__,
        )
        page_size = None

    return PageMeta(next_cursor=next_cursor, page_size=page_size)


def unwrap(raw: Any, resource_key: str) -> UnwrappedPage[Any]:
    """Unwrap a raw list response.

    Args:
        raw: Decoded JSON payload
        resource_key: Property holding the items in a wrapped response

    Returns:
        UnwrappedPage with items and, for wrapped responses, pagination meta.
        Unrecognized payloads yield an empty page; this never raises.
    """
    if isinstance(raw, list):
        return UnwrappedPage(items=list(raw), meta=None)

    if isinstance(raw, dict) and isinstance(raw.get(resource_key), list):
        items = list(raw[resource_key])
        meta = _parse_meta(raw.get("meta"), resource_key)
        if meta is not None and meta.page_size is not None and len(items) > meta.page_size:
            log_page_size_exceeded(
                resource_key=resource_key, item_count=len(items), page_size=meta.page_size
            )
        return UnwrappedPage(items=items, meta=meta)

    log_unrecognized_shape(
        resource_key=resource_key,
        received_type=type(raw).__name__,
        keys=sorted(str(k) for k in raw) if isinstance(raw, dict) else None,
    )
    return UnwrappedPage(items=[], meta=None)


class ResponseUnwrapper:
    """Unwraps responses using a per-resource shape table.

    The table maps logical resource names (``"recurring-tasks"``) to the
    property holding their items (``"tasks"``) and the layout the upstream is
    documented to use. The configured family is only used for diagnostics:
    unwrapping itself always follows the payload's actual structure.
    """

    def __init__(self, shapes: Mapping[str, ResourceShape] | None = None) -> None:
        self._shapes = dict(shapes or {})

    def shape_for(self, resource: str) -> ResourceShape:
        """Configured shape for ``resource``.

        Unknown resources are assumed to be wrapped under their own name.
        """
        return self._shapes.get(resource) or ResourceShape(resource_key=resource)

    def unwrap(self, raw: Any, resource: str) -> UnwrappedPage[Any]:
        """Unwrap ``raw`` for the logical ``resource``."""
        shape = self.shape_for(resource)
        received = ShapeFamily.detect(raw, shape.resource_key)
        if received != ShapeFamily.UNKNOWN and received != shape.family:
            log_shape_mismatch(
                resource=resource, expected=shape.family.value, received=received.value
            )
        return unwrap(raw, shape.resource_key)
