"""
SAR MCP Constants

Static values that rarely change: protocol identity, tool defaults,
and JSON-RPC error codes.
"""

SERVER_NAME = "sar-mcp"
SERVER_VERSION = "0.2.0"
PROTOCOL_VERSION = "2024-11-05"

# --- Tool Defaults ---
# Coordinates used when alt_route / set_geofence_alert omit an argument

DEFAULT_ORIGIN = (3.043, 101.449)
DEFAULT_DESTINATION = (3.155, 101.712)
DEFAULT_GEOFENCE_RADIUS_KM = 1.0

# --- JSON-RPC Error Codes ---

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
REMOTE_ERROR = -32000

# --- HTTP ---

DEFAULT_HTTP_PORT = 8080
