"""
Tests for logging setup. Stdout carries JSON-RPC frames, so log records
must never reach it.
"""

import logging
import sys

from sar_mcp.configs import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_stderr_only_when_log_file_blank(self, capsys):
        setup_logging()

        get_logger("bridge").error("remote unreachable")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "remote unreachable" in captured.err

    def test_root_stdout_handler_never_receives_records(self, capsys):
        root_handler = logging.StreamHandler(sys.stdout)
        logging.getLogger().addHandler(root_handler)
        try:
            setup_logging()
            get_logger("tools").warning("validation failed")
        finally:
            logging.getLogger().removeHandler(root_handler)

        assert capsys.readouterr().out == ""

    def test_log_file_in_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SAR_LOG_FILE")

        setup_logging()
        get_logger("bridge").info("bridge starting")

        log_path = tmp_path / "sar-data" / "sar-mcp.log"
        for handler in logging.getLogger("sar_mcp").handlers:
            handler.flush()
        assert "bridge starting" in log_path.read_text()

    def test_file_mode_keeps_info_off_stderr(self, capsys, tmp_path):
        setup_logging(log_file=str(tmp_path / "bridge.log"))

        get_logger("bridge").info("quiet")

        assert "quiet" not in capsys.readouterr().err

    def test_debug_level(self):
        logger = setup_logging(debug=True, log_file="")
        assert logger.level == logging.DEBUG

    def test_component_logger_name(self):
        assert get_logger("http.api").name == "sar_mcp.http.api"
