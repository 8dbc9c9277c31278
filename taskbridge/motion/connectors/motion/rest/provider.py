"""Motion REST connector.

Read access to the Motion API for tool handlers. Every request runs through
the retry executor, every list operation through the pagination aggregator,
and every task/project record through the field normalizers.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. Name resolution, formatting and
    tool registration belong to the calling layer.
"""

from __future__ import annotations

from typing import Any

from taskbridge.motion.runtime.pagination import (
    AggregationResult,
    PaginationLimits,
    ResponseUnwrapper,
)
from taskbridge.motion.runtime.rest import RestRunner, RESTTransport
from taskbridge.motion.runtime.retry import AttemptListener, RetryExecutor

from ..config import RESOURCE_SHAPES, MotionConfig
from .endpoints import get_endpoint_adapter, get_endpoint_spec


class MotionRESTConnector:
    """Motion REST connector.

    One connector holds one HTTP session; close it with ``close()`` or use
    it as an async context manager.
    """

    def __init__(
        self,
        config: MotionConfig,
        *,
        retry: RetryExecutor | None = None,
        listeners: list[AttemptListener] | None = None,
    ) -> None:
        """Initialize Motion REST connector.

        Args:
            config: Connector configuration (API key, policy, limits)
            retry: Optional pre-built retry executor (tests inject one with a
                fake sleep); built from ``config.retry_policy`` otherwise
            listeners: Attempt listeners for the default executor
        """
        self.config = config
        self._transport = RESTTransport(
            base_url=config.base_url, api_key=config.api_key, timeout=config.timeout
        )
        self._runner = RestRunner(
            self._transport,
            retry=retry or RetryExecutor(config.retry_policy, listeners=listeners),
            unwrapper=ResponseUnwrapper(RESOURCE_SHAPES),
            limits=config.limits,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> MotionRESTConnector:
        """Build a connector from ``MOTION_*`` environment variables."""
        return cls(MotionConfig.from_env(**overrides))

    async def fetch(
        self, endpoint_id: str, params: dict[str, Any], *, timeout: float | None = None
    ) -> Any:
        """Fetch a single (non-paginated) response from an endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "task", "project")
            params: Request parameters
            timeout: Optional deadline in seconds covering all retries

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter_cls = self._resolve(endpoint_id)
        return await self._runner.run(
            spec=spec, adapter=adapter_cls(), params=params, timeout=timeout
        )

    async def fetch_all(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[Any]:
        """Collect every page of a list endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "tasks", "workspaces")
            params: Request parameters
            limits: Overrides the configured pagination limits
            timeout: Optional per-page deadline in seconds

        Returns:
            AggregationResult; callers should surface ``truncated`` to users

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter_cls = self._resolve(endpoint_id)
        return await self._runner.paginate(
            spec=spec,
            adapter=adapter_cls(),
            params=params or {},
            limits=limits,
            timeout=timeout,
        )

    def _resolve(self, endpoint_id: str):
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return spec, adapter_cls

    async def list_tasks(
        self,
        workspace_id: str | None = None,
        *,
        project_id: str | None = None,
        assignee_id: str | None = None,
        status: str | None = None,
        label: str | None = None,
        name: str | None = None,
        include_all_statuses: bool = False,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        """List tasks with normalized status, duration and labels.

        Args:
            workspace_id: Workspace to list from (API default when None)
            project_id: Only tasks in this project
            assignee_id: Only tasks assigned to this user
            status: Only tasks with this status name
            label: Only tasks carrying this label
            name: Case-insensitive name filter
            include_all_statuses: Also return tasks in resolved statuses
            limits: Overrides the configured pagination limits
            timeout: Optional per-page deadline in seconds
        """
        params = {
            "workspace_id": workspace_id,
            "project_id": project_id,
            "assignee_id": assignee_id,
            "status": status,
            "label": label,
            "name": name,
            "include_all_statuses": include_all_statuses,
        }
        return await self.fetch_all("tasks", params, limits=limits, timeout=timeout)

    async def get_task(self, task_id: str, *, timeout: float | None = None) -> dict[str, Any]:
        return await self.fetch("task", {"task_id": task_id}, timeout=timeout)

    async def list_projects(
        self,
        workspace_id: str | None = None,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all(
            "projects", {"workspace_id": workspace_id}, limits=limits, timeout=timeout
        )

    async def get_project(
        self, project_id: str, *, timeout: float | None = None
    ) -> dict[str, Any]:
        return await self.fetch("project", {"project_id": project_id}, timeout=timeout)

    async def list_comments(
        self,
        task_id: str,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all(
            "comments", {"task_id": task_id}, limits=limits, timeout=timeout
        )

    async def list_recurring_tasks(
        self,
        workspace_id: str,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all(
            "recurring-tasks", {"workspace_id": workspace_id}, limits=limits, timeout=timeout
        )

    async def list_custom_fields(
        self,
        workspace_id: str,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all(
            "custom-fields", {"workspace_id": workspace_id}, limits=limits, timeout=timeout
        )

    async def list_workspaces(
        self, *, limits: PaginationLimits | None = None, timeout: float | None = None
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all("workspaces", limits=limits, timeout=timeout)

    async def list_statuses(
        self,
        workspace_id: str | None = None,
        *,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[Any]:
        return await self.fetch_all(
            "statuses", {"workspace_id": workspace_id}, limits=limits, timeout=timeout
        )

    async def list_users(
        self,
        workspace_id: str | None = None,
        *,
        team_id: str | None = None,
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all(
            "users",
            {"workspace_id": workspace_id, "team_id": team_id},
            limits=limits,
            timeout=timeout,
        )

    async def list_schedules(
        self, *, limits: PaginationLimits | None = None, timeout: float | None = None
    ) -> AggregationResult[dict[str, Any]]:
        return await self.fetch_all("schedules", limits=limits, timeout=timeout)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> MotionRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
