"""Motion comment listing for a task."""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import PassthroughAdapter


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters; ``taskId`` is required by the API."""
    return {"taskId": params["task_id"]}


SPEC = RestEndpointSpec(
    id="comments",
    build_path=lambda _: "/comments",
    build_query=build_query,
    resource="comments",
)


class Adapter(PassthroughAdapter):
    pass
