"""
SAR MCP Logging Configuration

Configures logging based on environment variables:
- SAR_DEBUG: Enable debug logging (default: false)
- SAR_LOG_FILE: Log file path (default: $SAR_DATA_PATH/sar-mcp.log)

Stdout is reserved for JSON-RPC traffic, so no handler ever writes there.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from sar_mcp.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for SAR MCP.

    Args:
        debug: Enable debug level. Defaults to SAR_DEBUG env var.
        log_file: Log file path. Defaults to SAR_LOG_FILE env var,
                  or $SAR_DATA_PATH/sar-mcp.log if not set. Pass an
                  empty string to log to stderr only.

    Returns:
        Root logger for sar_mcp
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("SAR_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("SAR_LOG_FILE")
        if log_file is None:
            log_file = str(get_data_path() / "sar-mcp.log")

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("sar_mcp")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()
    # Root handlers may write to stdout, which carries JSON-RPC frames
    logger.propagate = False

    # Always add stderr handler (but only for warnings+ unless no file)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "bridge", "tools", "http")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"sar_mcp.{component}")
