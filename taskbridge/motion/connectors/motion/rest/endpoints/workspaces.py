"""Motion workspace and status listings.

Both are returned as bare arrays. Workspace records embed ``labels`` and
``statuses`` in their structured forms, which the adapter normalizes.
"""

from __future__ import annotations

from typing import Any

from taskbridge.motion.normalize import normalize_status
from taskbridge.motion.runtime.rest import ResponseAdapter, RestEndpointSpec

from ..adapters import RecordAdapter

SPEC = RestEndpointSpec(
    id="workspaces",
    build_path=lambda _: "/workspaces",
    resource="workspaces",
)


def build_status_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"workspaceId": params.get("workspace_id")}


STATUSES_SPEC = RestEndpointSpec(
    id="statuses",
    build_path=lambda _: "/statuses",
    build_query=build_status_query,
    resource="statuses",
)


class Adapter(RecordAdapter):
    pass


class StatusesAdapter(ResponseAdapter):
    """Turns each status entry into a NormalizedStatus."""

    def parse_item(self, item: Any, params: dict[str, Any]) -> Any:
        return normalize_status(item)
