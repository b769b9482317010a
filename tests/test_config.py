"""
Tests for configuration loading.
"""

import pytest

from sar_mcp.configs import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    get_http_port,
    load_endpoint_config,
    load_yaml_config,
)
from sar_mcp.configs.runtime import RemoteEndpointConfig
from sar_mcp.exceptions import ConfigurationError, MissingConfigError


def write_config(text: str) -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestRemoteEndpointConfig:
    """Tests for base URL normalization."""

    def test_trailing_slash_added(self):
        assert RemoteEndpointConfig("https://api.example.com/prod").base_url == "https://api.example.com/prod/"

    def test_trailing_slash_kept(self):
        assert RemoteEndpointConfig("https://api.example.com/prod/").base_url == "https://api.example.com/prod/"

    @pytest.mark.parametrize("value", ["api.example.com/prod", "/prod", "ftp://files.example.com/"])
    def test_rejects_non_http_urls(self, value):
        with pytest.raises(ConfigurationError):
            RemoteEndpointConfig(value)

    def test_immutable(self):
        config = RemoteEndpointConfig("https://api.example.com")
        with pytest.raises(AttributeError):
            config.base_url = "https://other.example.com/"


class TestLoadEndpointConfig:
    """Tests for environment and YAML precedence."""

    def test_missing_base_url(self):
        with pytest.raises(MissingConfigError) as exc_info:
            load_endpoint_config()
        assert "API_BASE" in exc_info.value.message

    def test_api_base_env(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "https://abc.execute-api.us-east-1.amazonaws.com/prod")
        config = load_endpoint_config()
        assert config.base_url == "https://abc.execute-api.us-east-1.amazonaws.com/prod/"
        assert config.request_timeout is None

    def test_dashboard_env_fallback(self, monkeypatch):
        monkeypatch.setenv("SAR_API_BASE", "https://dash.example.com/api")
        assert load_endpoint_config().base_url == "https://dash.example.com/api/"

    def test_api_base_wins_over_dashboard_env(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "https://bridge.example.com")
        monkeypatch.setenv("SAR_API_BASE", "https://dash.example.com")
        assert load_endpoint_config().base_url == "https://bridge.example.com/"

    def test_yaml_base_url(self):
        write_config("api_base: https://yaml.example.com/stage\nrequest_timeout: 15\n")
        config = load_endpoint_config()
        assert config.base_url == "https://yaml.example.com/stage/"
        assert config.request_timeout == 15.0

    def test_env_overrides_yaml(self, monkeypatch):
        write_config("api_base: https://yaml.example.com/stage\nrequest_timeout: 15\n")
        monkeypatch.setenv("API_BASE", "https://env.example.com")
        monkeypatch.setenv("SAR_REQUEST_TIMEOUT", "4")
        config = load_endpoint_config()
        assert config.base_url == "https://env.example.com/"
        assert config.request_timeout == 4.0

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, monkeypatch, value):
        monkeypatch.setenv("API_BASE", "https://env.example.com")
        monkeypatch.setenv("SAR_REQUEST_TIMEOUT", value)
        with pytest.raises(ConfigurationError):
            load_endpoint_config()

    def test_blank_env_is_missing(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "   ")
        with pytest.raises(MissingConfigError):
            load_endpoint_config()


class TestYamlConfig:
    """Tests for config.yaml handling."""

    def test_missing_file_is_empty(self):
        assert load_yaml_config() == {}

    def test_create_default_config(self):
        path = create_default_config()
        assert path == get_config_path()
        assert path.read_text() == DEFAULT_CONFIG_YAML
        assert load_yaml_config() == {"http_port": 8080}

    def test_create_default_config_keeps_existing(self):
        write_config("http_port: 9000\n")
        create_default_config()
        assert load_yaml_config() == {"http_port": 9000}

    def test_http_port_default(self):
        assert get_http_port() == 8080

    def test_http_port_env(self, monkeypatch):
        write_config("http_port: 9000\n")
        monkeypatch.setenv("SAR_HTTP_PORT", "9100")
        assert get_http_port() == 9100

    def test_http_port_invalid(self, monkeypatch):
        monkeypatch.setenv("SAR_HTTP_PORT", "eighty")
        with pytest.raises(ConfigurationError):
            get_http_port()
