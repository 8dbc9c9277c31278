"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import (
    ClientError,
    RateLimitError,
    ServerError,
    TransportError,
    UpstreamError,
)
from ..retry.outcomes import parse_retry_after

logger = logging.getLogger(__name__)


def _error_message(body: Any, status: int) -> str:
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    if isinstance(body, str) and body.strip():
        return body.strip()[:200]
    return f"HTTP {status}"


class HTTPClient:
    """Async HTTP client wrapper.

    Non-2xx responses are raised as typed errors (RateLimitError,
    ServerError, ClientError) and failures without a response as
    TransportError. Retrying is left to the caller.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        url = self._url(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                return await self._handle_response(response, "GET", url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "http_transport_error",
                extra={"method": "GET", "url": url, "error_type": type(e).__name__},
            )
            raise TransportError(f"GET {url} failed: {str(e) or type(e).__name__}") from e

    async def _handle_response(self, response: aiohttp.ClientResponse, method: str, url: str) -> Any:
        status = response.status
        if status >= 400:
            body = await self._read_error_body(response)
            message = _error_message(body, status)
            logger.warning(
                "http_error_response",
                extra={"method": method, "url": url, "status": status, "api_message": message},
            )
            if status == 429:
                retry_after = parse_retry_after(response.headers.get("Retry-After"))
                raise RateLimitError(message, retry_after=retry_after, body=body)
            if status >= 500:
                raise ServerError(message, status_code=status, body=body)
            raise ClientError(message, status_code=status, body=body)

        logger.debug("http_response", extra={"method": method, "url": url, "status": status})
        if status == 204:
            return None
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise UpstreamError(f"Invalid JSON from {url}", status_code=status) from e

    @staticmethod
    async def _read_error_body(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except (ValueError, aiohttp.ClientError):
            try:
                return await response.text()
            except (ValueError, aiohttp.ClientError):
                return None

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
