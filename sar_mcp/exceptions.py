"""
SAR MCP Exception Hierarchy

Centralized exception classes for structured error handling across the bridge
and the proxy API. All project-specific exceptions inherit from SarError.

Usage:
    from sar_mcp.exceptions import RemoteRequestError, ToolValidationError

    try:
        payload = dispatch_tool(client, "explain_event", {"eventId": event_id})
    except RemoteRequestError as e:
        logger.error(f"Explain failed: {e}")
"""

from typing import Any


class SarError(Exception):
    """Base exception for all SAR MCP errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SarError):
    """Error in bridge configuration."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    pass


# =============================================================================
# Tool Errors
# =============================================================================


class ToolError(SarError):
    """Base class for tool dispatch errors."""

    pass


class UnknownToolError(ToolError):
    """Requested tool is not registered."""

    def __init__(self, tool_name: Any):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolValidationError(ToolError):
    """Tool arguments failed the tool's input model."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]):
        fields = ", ".join(".".join(str(p) for p in err.get("loc", ())) or "arguments" for err in errors)
        super().__init__(f"Invalid arguments for {tool_name}: {fields}")
        self.tool_name = tool_name
        self.errors = errors


# =============================================================================
# Remote Errors
# =============================================================================


class RemoteRequestError(SarError):
    """Request to the remote SAR API failed."""

    def __init__(
        self,
        message: str,
        path: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details: dict[str, Any] = {"path": path}
        if status_code is not None:
            details["status"] = status_code
        if response_text:
            details["body"] = response_text[:200]
        super().__init__(message, details)
        self.path = path
        self.status_code = status_code
        self.response_text = response_text


class RemoteConnectionError(RemoteRequestError):
    """Request never produced a response (DNS, connection, timeout)."""

    pass
