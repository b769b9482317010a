"""
MCP Stdio-to-HTTP Bridge

Reads MCP JSON-RPC messages from stdin, dispatches them to the registered
SAR tools, and writes responses to stdout. Each tool call becomes exactly
one request against the remote SAR API.
"""

from sar_mcp.controllers.bridge.bridge import handle_message, main, serve

__all__ = ["handle_message", "main", "serve"]
