"""Motion project endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import RecordAdapter


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"workspaceId": params.get("workspace_id")}


SPEC = RestEndpointSpec(
    id="projects",
    build_path=lambda _: "/projects",
    build_query=build_query,
    resource="projects",
)

PROJECT_SPEC = RestEndpointSpec(
    id="project",
    build_path=lambda params: f"/projects/{params['project_id']}",
)


class Adapter(RecordAdapter):
    pass
