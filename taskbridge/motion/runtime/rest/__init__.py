"""REST runtime: HTTP client, authenticated transport, and request runner."""

from .http import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import API_KEY_HEADER, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "API_KEY_HEADER",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
