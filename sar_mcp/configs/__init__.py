"""
SAR MCP Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from sar_mcp.configs.logging import get_logger, setup_logging

# Paths
from sar_mcp.configs.paths import ensure_data_dir, get_data_path

# Constants
from sar_mcp.configs.constants import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
)

# YAML config
from sar_mcp.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
)

# Runtime
from sar_mcp.configs.runtime import (
    RemoteEndpointConfig,
    get_base_url,
    get_http_port,
    load_endpoint_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Constants
    "PROTOCOL_VERSION",
    "SERVER_NAME",
    "SERVER_VERSION",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Runtime
    "RemoteEndpointConfig",
    "get_base_url",
    "get_http_port",
    "load_endpoint_config",
]
