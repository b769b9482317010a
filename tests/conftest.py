"""
Pytest fixtures for SAR MCP tests.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# Add project root to path for sar_mcp imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sar_mcp.configs.runtime import RemoteEndpointConfig  # noqa: E402
from sar_mcp.utils.http_client import RemoteClient  # noqa: E402

BASE_URL = "https://api.example.com/prod"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None, reason: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)
        self.reason = reason or ("OK" if status_code < 400 else "Error")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Keep every test away from the real environment and data directory."""
    for name in ("API_BASE", "SAR_API_BASE", "SAR_REQUEST_TIMEOUT", "SAR_HTTP_PORT", "SAR_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SAR_DATA_PATH", str(tmp_path / "sar-data"))
    monkeypatch.setenv("SAR_LOG_FILE", "")
    yield
    logger = logging.getLogger("sar_mcp")
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def endpoint_config() -> RemoteEndpointConfig:
    return RemoteEndpointConfig(base_url=BASE_URL)


@pytest.fixture
def mock_session() -> MagicMock:
    """requests.Session double; queue replies via session.request.return_value."""
    session = MagicMock()
    session.request.return_value = FakeResponse(200, {})
    return session


@pytest.fixture
def client(endpoint_config: RemoteEndpointConfig, mock_session: MagicMock) -> RemoteClient:
    return RemoteClient(endpoint_config, session=mock_session)


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    """Factory for canned remote responses."""
    return FakeResponse
