"""
SAR MCP Tools

The six bridged tools, their registry and the dispatcher that runs them.
"""

from sar_mcp.tools.dispatcher import call_tool, dispatch_tool, validate_arguments
from sar_mcp.tools.envelope import json_tool_result
from sar_mcp.tools.registry import TOOL_REGISTRY, TOOLS, ToolDef, get_tool, list_tool_schemas

__all__ = [
    "TOOLS",
    "TOOL_REGISTRY",
    "ToolDef",
    "call_tool",
    "dispatch_tool",
    "get_tool",
    "json_tool_result",
    "list_tool_schemas",
    "validate_arguments",
]
