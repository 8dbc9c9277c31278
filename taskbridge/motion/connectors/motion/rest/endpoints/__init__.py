"""Motion REST endpoint registry.

This module collects the endpoint specifications and adapters from the
per-resource modules.
"""

from __future__ import annotations

from taskbridge.motion.runtime.rest import ResponseAdapter, RestEndpointSpec

from .comments import SPEC as CommentsSpec  # noqa: N811
from .comments import Adapter as CommentsAdapter
from .custom_fields import SPEC as CustomFieldsSpec  # noqa: N811
from .custom_fields import Adapter as CustomFieldsAdapter
from .projects import PROJECT_SPEC as ProjectSpec  # noqa: N811
from .projects import SPEC as ProjectsSpec  # noqa: N811
from .projects import Adapter as ProjectsAdapter
from .recurring_tasks import SPEC as RecurringTasksSpec  # noqa: N811
from .recurring_tasks import Adapter as RecurringTasksAdapter
from .tasks import SPEC as TasksSpec  # noqa: N811
from .tasks import TASK_SPEC as TaskSpec  # noqa: N811
from .tasks import Adapter as TasksAdapter
from .users import SCHEDULES_SPEC as SchedulesSpec  # noqa: N811
from .users import SPEC as UsersSpec  # noqa: N811
from .users import Adapter as UsersAdapter
from .workspaces import SPEC as WorkspacesSpec  # noqa: N811
from .workspaces import STATUSES_SPEC as StatusesSpec  # noqa: N811
from .workspaces import Adapter as WorkspacesAdapter
from .workspaces import StatusesAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "tasks": (TasksSpec, TasksAdapter),
    "task": (TaskSpec, TasksAdapter),
    "projects": (ProjectsSpec, ProjectsAdapter),
    "project": (ProjectSpec, ProjectsAdapter),
    "comments": (CommentsSpec, CommentsAdapter),
    "recurring-tasks": (RecurringTasksSpec, RecurringTasksAdapter),
    "custom-fields": (CustomFieldsSpec, CustomFieldsAdapter),
    "workspaces": (WorkspacesSpec, WorkspacesAdapter),
    "statuses": (StatusesSpec, StatusesAdapter),
    "users": (UsersSpec, UsersAdapter),
    "schedules": (SchedulesSpec, UsersAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "tasks", "workspaces")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoint_ids() -> list[str]:
    return list(_ENDPOINT_REGISTRY)


__all__ = ["get_endpoint_spec", "get_endpoint_adapter", "list_endpoint_ids"]
