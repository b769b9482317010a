"""
SAR MCP Runtime Configuration

Builds the immutable endpoint configuration at process entry.
Combines environment variables and the YAML config file.
"""

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from sar_mcp.configs.constants import DEFAULT_HTTP_PORT
from sar_mcp.configs.yaml_config import load_yaml_config
from sar_mcp.exceptions import ConfigurationError, MissingConfigError

BASE_URL_ENV_VARS = ("API_BASE", "SAR_API_BASE")

MISSING_BASE_URL_MESSAGE = "Missing API_BASE env var. Set API_BASE to the API Gateway base URL."


@dataclass(frozen=True)
class RemoteEndpointConfig:
    """Where and how the bridge reaches the remote SAR API."""

    base_url: str
    request_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                "API base URL must be an absolute http(s) URL",
                {"base_url": self.base_url},
            )
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", f"{self.base_url}/")


def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError("Request timeout must be a number of seconds", {"value": value})
    if timeout <= 0:
        raise ConfigurationError("Request timeout must be positive", {"value": value})
    return timeout


def get_base_url(yaml_config: Optional[dict] = None) -> Optional[str]:
    """
    Get the configured API base URL.

    Priority:
    1. API_BASE env var (SAR_API_BASE accepted for dashboard deployments)
    2. api_base from config.yaml

    Returns:
        Base URL string, or None if not configured
    """
    for name in BASE_URL_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value

    if yaml_config is None:
        yaml_config = load_yaml_config()
    value = str(yaml_config.get("api_base") or "").strip()
    return value or None


def load_endpoint_config() -> RemoteEndpointConfig:
    """
    Load the endpoint configuration from environment and config.yaml.

    Raises:
        MissingConfigError: No base URL configured
        ConfigurationError: Base URL or timeout is malformed
    """
    yaml_config = load_yaml_config()

    base_url = get_base_url(yaml_config)
    if not base_url:
        raise MissingConfigError(MISSING_BASE_URL_MESSAGE)

    timeout_value = os.environ.get("SAR_REQUEST_TIMEOUT") or yaml_config.get("request_timeout")
    return RemoteEndpointConfig(base_url=base_url, request_timeout=_parse_timeout(timeout_value))


def get_http_port() -> int:
    """Get the proxy API port (SAR_HTTP_PORT env var, then config.yaml)."""
    value = os.environ.get("SAR_HTTP_PORT") or load_yaml_config().get("http_port")
    if value is None:
        return DEFAULT_HTTP_PORT
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError("HTTP port must be an integer", {"value": value})
