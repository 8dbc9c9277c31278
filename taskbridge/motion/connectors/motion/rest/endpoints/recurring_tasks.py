"""Motion recurring task listing.

The response is wrapped under ``tasks`` rather than ``recurringTasks``; the
shape table in ``config`` maps the resource accordingly.
"""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import RecordAdapter


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"workspaceId": params["workspace_id"]}


SPEC = RestEndpointSpec(
    id="recurring-tasks",
    build_path=lambda _: "/recurring-tasks",
    build_query=build_query,
    resource="recurring-tasks",
)


class Adapter(RecordAdapter):
    pass
