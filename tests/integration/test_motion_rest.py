"""Integration tests against the live Motion REST API.

Requires MOTION_API_KEY. Read-only: no records are created or modified.
"""

import os

import pytest

from taskbridge.motion import MotionRESTConnector, NormalizedStatus
from taskbridge.motion.runtime.pagination import PaginationLimits

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_MOTION_NETWORK_TESTS") != "1" or not os.environ.get("MOTION_API_KEY"),
    reason="Requires network access and MOTION_API_KEY to test the Motion API",
)


class TestMotionRESTIntegration:
    """Smoke tests for the read endpoints."""

    @pytest.mark.asyncio
    async def test_list_workspaces(self):
        async with MotionRESTConnector.from_env() as connector:
            result = await connector.list_workspaces()

            assert result.pages_fetched == 1
            for workspace in result.items:
                assert workspace["id"]
                assert all(isinstance(s, NormalizedStatus) for s in workspace.get("statuses", []))

    @pytest.mark.asyncio
    async def test_list_tasks_bounded(self):
        async with MotionRESTConnector.from_env() as connector:
            workspaces = await connector.list_workspaces()
            if not workspaces.items:
                pytest.skip("No workspaces available for this API key")

            limits = PaginationLimits(max_pages=2, max_items=50)
            result = await connector.list_tasks(workspaces.items[0]["id"], limits=limits)

            assert result.pages_fetched <= 2
            for task in result.items[:10]:
                assert isinstance(task.get("labels", []), list)
                if "status" in task:
                    assert isinstance(task["status"], NormalizedStatus)
