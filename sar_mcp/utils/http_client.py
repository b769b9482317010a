"""
Remote SAR API Client

Single-attempt JSON requests against the configured API base URL.
Uses `requests` with standardized error handling: every failure surfaces as
a RemoteRequestError carrying the attempted path, status and raw body.

Usage:
    from sar_mcp.configs import load_endpoint_config
    from sar_mcp.utils.http_client import RemoteClient

    client = RemoteClient(load_endpoint_config())
    events = client.request_json("/events")
    result = client.request_json("/ingest", method="POST", body={"text": "Flooding"})
"""

from typing import Any, Optional
from urllib.parse import urljoin, urlsplit

import requests

from sar_mcp.configs import get_logger
from sar_mcp.configs.runtime import RemoteEndpointConfig
from sar_mcp.exceptions import RemoteConnectionError, RemoteRequestError

logger = get_logger("http_client")

_NO_BODY = object()


def to_relative_path(path: str) -> str:
    """Strip a single leading slash so urljoin keeps the base URL's own path."""
    return path[1:] if path.startswith("/") else path


def resolve_url(base_url: str, path: str) -> str:
    """
    Resolve a route path against the API base URL.

    Args:
        base_url: Absolute base URL ending in "/"
        path: Route path, with or without a leading slash

    Returns:
        Absolute URL, e.g. ("https://h/prod/", "/events") -> "https://h/prod/events"
    """
    return urljoin(base_url, to_relative_path(path))


class RemoteClient:
    """
    Synchronous HTTP client for the remote SAR API.

    One call, one request: no retries, no caching. Timeout is taken from
    the endpoint config and is unbounded when not configured.
    """

    def __init__(
        self,
        config: RemoteEndpointConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def request_json(
        self,
        path: str,
        method: str = "GET",
        body: Any = _NO_BODY,
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Args:
            path: Route path relative to the base URL
            method: HTTP method
            body: JSON-serializable request body (omit for no body)

        Returns:
            Parsed JSON response, unchanged

        Raises:
            RemoteConnectionError: No response was received
            RemoteRequestError: Non-2xx status or non-JSON body
        """
        url = resolve_url(self.base_url, path)
        url_path = urlsplit(url).path

        kwargs: dict[str, Any] = {"timeout": self.config.request_timeout}
        if body is not _NO_BODY:
            kwargs["json"] = body

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request to {url_path} failed: {e}")
            raise RemoteConnectionError(f"Request to {url_path} failed: {e}", path=url_path) from e

        if not response.ok:
            text = response.text
            logger.error(f"Request to {url_path} failed: {response.status_code} {response.reason}")
            raise RemoteRequestError(
                f"Request to {url_path} failed: {response.status_code} {response.reason}\n{text}",
                path=url_path,
                status_code=response.status_code,
                response_text=text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteRequestError(
                f"Invalid JSON response from {url_path}",
                path=url_path,
                status_code=response.status_code,
                response_text=response.text,
            ) from e
