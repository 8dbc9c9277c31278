"""Response adapters for Motion REST endpoints."""

from __future__ import annotations

from typing import Any

from taskbridge.motion.normalize import normalize_record
from taskbridge.motion.runtime.rest import ResponseAdapter


class PassthroughAdapter(ResponseAdapter):
    """Returns responses and list items as decoded."""

    pass


class RecordAdapter(ResponseAdapter):
    """Normalizes union-typed fields (status, duration, labels) on records."""

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return normalize_record(response)

    def parse_item(self, item: Any, params: dict[str, Any]) -> Any:
        return normalize_record(item)
