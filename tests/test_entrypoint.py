"""
Tests for entrypoint mode dispatch.
"""

import sys

import pytest

import entrypoint


class TestEntrypoint:
    """Tests for entrypoint.main."""

    def test_unknown_mode(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["entrypoint.py", "daemon"])

        with pytest.raises(SystemExit) as exc_info:
            entrypoint.main()

        assert exc_info.value.code == 1
        assert "Unknown mode: daemon" in capsys.readouterr().err

    def test_init_config(self, monkeypatch, capsys):
        from sar_mcp.configs import get_config_path

        monkeypatch.setattr(sys, "argv", ["entrypoint.py", "init-config"])
        entrypoint.main()

        assert capsys.readouterr().out.strip() == str(get_config_path())
        assert get_config_path().exists()

    def test_proxy_without_base_url_still_starts(self, monkeypatch):
        started = {}

        def fake_run_server(app, host, port):
            started["configured"] = app.state.client is not None
            started["port"] = port

        monkeypatch.setattr(sys, "argv", ["entrypoint.py", "proxy"])
        monkeypatch.setattr("sar_mcp.controllers.http.run_server", fake_run_server)
        entrypoint.main()

        assert started == {"configured": False, "port": 8080}

    def test_proxy_with_base_url(self, monkeypatch):
        started = {}

        def fake_run_server(app, host, port):
            started["base_url"] = app.state.client.base_url
            started["port"] = port

        monkeypatch.setenv("API_BASE", "https://api.example.com/prod")
        monkeypatch.setenv("SAR_HTTP_PORT", "9200")
        monkeypatch.setattr(sys, "argv", ["entrypoint.py", "proxy"])
        monkeypatch.setattr("sar_mcp.controllers.http.run_server", fake_run_server)
        entrypoint.main()

        assert started == {"base_url": "https://api.example.com/prod/", "port": 9200}

    def test_proxy_invalid_base_url_exits(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "not-a-url")
        monkeypatch.setattr(sys, "argv", ["entrypoint.py", "proxy"])

        with pytest.raises(SystemExit) as exc_info:
            entrypoint.main()

        assert exc_info.value.code == 1
