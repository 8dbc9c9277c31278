"""Motion custom field listing (beta API, scoped to a workspace)."""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.rest import RestEndpointSpec

from ..adapters import PassthroughAdapter


def build_path(params: dict[str, Any]) -> str:
    return f"/beta/workspaces/{params['workspace_id']}/custom-fields"


SPEC = RestEndpointSpec(
    id="custom-fields",
    build_path=build_path,
    resource="custom-fields",
)


class Adapter(PassthroughAdapter):
    pass
