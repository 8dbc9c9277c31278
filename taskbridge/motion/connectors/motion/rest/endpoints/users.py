"""Motion user and schedule listings (bare arrays)."""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import PassthroughAdapter


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "workspaceId": params.get("workspace_id"),
        "teamId": params.get("team_id"),
    }


SPEC = RestEndpointSpec(
    id="users",
    build_path=lambda _: "/users",
    build_query=build_query,
    resource="users",
)

SCHEDULES_SPEC = RestEndpointSpec(
    id="schedules",
    build_path=lambda _: "/schedules",
    resource="schedules",
)


class Adapter(PassthroughAdapter):
    pass
