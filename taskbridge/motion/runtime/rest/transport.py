"""Authenticated REST transport for the Motion API."""

from __future__ import annotations

from typing import Any

from .http import HTTPClient

API_KEY_HEADER = "X-API-Key"


class RESTTransport:
    """Thin wrapper over HTTPClient that attaches authentication headers."""

    def __init__(self, base_url: str, *, api_key: str | None = None, timeout: float = 30.0) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._headers: dict[str, str] = {"Accept": "application/json"}
        if api_key:
            self._headers[API_KEY_HEADER] = api_key

    def _merge_headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {**self._headers, **(headers or {})}

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=self._merge_headers(headers))

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
