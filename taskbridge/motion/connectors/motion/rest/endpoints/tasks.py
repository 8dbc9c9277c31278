"""Motion task endpoint definitions and adapters.

``GET /tasks`` is cursor-paginated and wrapped under ``tasks``;
``GET /tasks/{id}`` returns a single task object.
"""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import RecordAdapter


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the task listing."""
    return {
        "workspaceId": params.get("workspace_id"),
        "projectId": params.get("project_id"),
        "assigneeId": params.get("assignee_id"),
        "status": params.get("status"),
        "label": params.get("label"),
        "name": params.get("name"),
        "includeAllStatuses": "true" if params.get("include_all_statuses") else None,
    }


SPEC = RestEndpointSpec(
    id="tasks",
    build_path=lambda _: "/tasks",
    build_query=build_query,
    resource="tasks",
)

TASK_SPEC = RestEndpointSpec(
    id="task",
    build_path=lambda params: f"/tasks/{params['task_id']}",
)


class Adapter(RecordAdapter):
    """Normalizes task records."""

    pass
