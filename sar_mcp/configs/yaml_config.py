"""
SAR MCP YAML Configuration

Loading and defaults for $SAR_DATA_PATH/config.yaml.
"""

from pathlib import Path

import yaml

from sar_mcp.configs.paths import ensure_data_dir, get_data_path

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# SAR MCP Configuration
# Environment variables (API_BASE, SAR_REQUEST_TIMEOUT, SAR_HTTP_PORT)
# take precedence over the values below.

# Base URL of the SAR REST API (API Gateway stage URL)
# api_base: https://YOUR-API-ID.execute-api.REGION.amazonaws.com/prod

# Seconds to wait for the remote API (omit to wait indefinitely)
# request_timeout: 30

# Port for the dashboard proxy API
http_port: 8080
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from config.yaml.

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        yaml.YAMLError: File exists but is not valid YAML
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    loaded = yaml.safe_load(config_path.read_text())
    return loaded if isinstance(loaded, dict) else {}


def create_default_config() -> Path:
    """
    Write the default config.yaml if none exists.

    Returns:
        Path to the config file
    """
    ensure_data_dir()
    config_path = get_config_path()
    if not config_path.exists():
        config_path.write_text(DEFAULT_CONFIG_YAML)
    return config_path
