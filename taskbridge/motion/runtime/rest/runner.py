"""REST request runner using endpoint specs and response adapters.

Every request goes through the RetryExecutor. List endpoints are walked with
the PaginationAggregator, each raw page unwrapped by the ResponseUnwrapper
and each item handed to the endpoint's adapter.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..pagination import (
    AggregationResult,
    PaginationAggregator,
    PaginationLimits,
    ResponseUnwrapper,
    UnwrappedPage,
)
from ..retry import RetryExecutor, RetryPolicy
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    method: str = "GET"
    # Logical resource name for list endpoints (key into the shape table)
    resource: str | None = None
    cursor_param: str = "cursor"


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response

    def parse_item(self, item: Any, params: dict[str, Any]) -> Any:
        return item


def _clean_query(query: dict[str, Any] | None) -> dict[str, Any] | None:
    # aiohttp rejects None query values
    if not query:
        return None
    return {k: v for k, v in query.items() if v is not None}


class RestRunner:
    def __init__(
        self,
        transport: RESTTransport,
        *,
        retry: RetryExecutor | None = None,
        unwrapper: ResponseUnwrapper | None = None,
        limits: PaginationLimits | None = None,
    ) -> None:
        self._t = transport
        self._retry = retry or RetryExecutor(RetryPolicy())
        self._unwrapper = unwrapper or ResponseUnwrapper()
        self._limits = limits or PaginationLimits()

    async def _request(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        query: dict[str, Any] | None,
        timeout: float | None,
    ) -> Any:
        if spec.method.upper() != "GET":
            raise ValueError(f"Unsupported method for {spec.id}: {spec.method}")
        path = spec.build_path(params)
        query = _clean_query(query)

        async def operation() -> Any:
            return await self._t.get(path, params=query)

        return await self._retry.execute(operation, operation_id=spec.id, timeout=timeout)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        timeout: float | None = None,
    ) -> Any:
        """Issue a single (non-paginated) request."""
        query = spec.build_query(params) if spec.build_query else None
        data = await self._request(spec, params, query, timeout)
        return adapter.parse(data, params)

    async def fetch_page(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        cursor: str | None = None,
        timeout: float | None = None,
    ) -> UnwrappedPage[Any]:
        """Fetch and unwrap one page of a list endpoint."""
        query = dict(spec.build_query(params)) if spec.build_query else {}
        if cursor is not None:
            query[spec.cursor_param] = cursor
        data = await self._request(spec, params, query, timeout)
        return self._unwrapper.unwrap(data, spec.resource or spec.id)

    async def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        limits: PaginationLimits | None = None,
        timeout: float | None = None,
    ) -> AggregationResult[Any]:
        """Collect every page of a list endpoint.

        Args:
            spec: Endpoint specification
            adapter: Adapter applied to each item
            params: Request parameters
            limits: Overrides the runner's default pagination limits
            timeout: Per-page deadline in seconds (covers that page's retries)
        """

        async def fetch(cursor: str | None) -> UnwrappedPage[Any]:
            return await self.fetch_page(spec=spec, params=params, cursor=cursor, timeout=timeout)

        aggregator = PaginationAggregator(limits or self._limits)
        return await aggregator.collect(
            fetch,
            resource=spec.resource or spec.id,
            transform=lambda item: adapter.parse_item(item, params),
        )
