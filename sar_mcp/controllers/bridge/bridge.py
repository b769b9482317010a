"""
Bridge JSON-RPC Loop

Line-oriented JSON-RPC 2.0 over stdin/stdout. Requests are handled strictly
one at a time; stdout carries only protocol messages.
"""

import json
import sys
from typing import Any, Optional, TextIO

from sar_mcp.configs import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    get_logger,
    load_endpoint_config,
    setup_logging,
)
from sar_mcp.configs.constants import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    REMOTE_ERROR,
)
from sar_mcp.exceptions import (
    ConfigurationError,
    RemoteRequestError,
    ToolValidationError,
    UnknownToolError,
)
from sar_mcp.tools import call_tool, list_tool_schemas
from sar_mcp.utils.http_client import RemoteClient

logger = get_logger("bridge")


def make_result(request_id: Any, result: dict) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def make_error(request_id: Any, code: int, message: str, data: Any = None) -> dict:
    """Build a JSON-RPC error response."""
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


def send_response(response: dict, stdout: TextIO) -> None:
    """Write one JSON-RPC response line to stdout."""
    stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
    stdout.flush()


def handle_initialize(request: dict) -> dict:
    """Handle MCP initialize request."""
    params = request.get("params") or {}
    return make_result(
        request.get("id"),
        {
            "protocolVersion": params.get("protocolVersion") or PROTOCOL_VERSION,
            "capabilities": {
                "tools": {},
            },
            "serverInfo": {
                "name": SERVER_NAME,
                "version": SERVER_VERSION,
            },
        },
    )


def handle_tools_list(request: dict) -> dict:
    """Handle MCP tools/list request."""
    return make_result(request.get("id"), {"tools": list_tool_schemas()})


def handle_tools_call(request: dict, client: RemoteClient) -> dict:
    """
    Handle MCP tools/call request.

    Unknown tools and invalid arguments are rejected before any network
    call. Remote failures come back as JSON-RPC errors carrying the
    attempted path, status and raw body.
    """
    request_id = request.get("id")
    params = request.get("params") or {}
    if not isinstance(params, dict):
        return make_error(request_id, INVALID_PARAMS, "params must be an object")

    tool_name = params.get("name")
    arguments = params.get("arguments")
    if arguments is not None and not isinstance(arguments, dict):
        return make_error(request_id, INVALID_PARAMS, "arguments must be an object")

    try:
        return make_result(request_id, call_tool(client, tool_name, arguments))
    except UnknownToolError as e:
        logger.error(str(e))
        return make_error(request_id, INVALID_PARAMS, e.message)
    except ToolValidationError as e:
        return make_error(request_id, INVALID_PARAMS, e.message, {"errors": e.errors})
    except RemoteRequestError as e:
        return make_error(
            request_id,
            REMOTE_ERROR,
            e.message,
            {"path": e.path, "status": e.status_code, "body": e.response_text},
        )


def handle_notification(request: dict) -> None:
    """Handle MCP notifications (no response needed)."""
    method = request.get("method", "")
    logger.debug(f"Received notification: {method}")


def handle_message(message: Any, client: RemoteClient) -> Optional[dict]:
    """
    Route one decoded JSON-RPC message.

    Returns:
        Response dict, or None when no response is due (notifications)
    """
    if not isinstance(message, dict):
        return make_error(None, INVALID_REQUEST, "Invalid Request")

    method = message.get("method")
    request_id = message.get("id")
    is_notification = "id" not in message

    if not isinstance(method, str):
        return None if is_notification else make_error(request_id, INVALID_REQUEST, "Invalid Request")

    logger.debug(f"Received: {method} (id={request_id})")

    if method.startswith("notifications/"):
        handle_notification(message)
        return None

    try:
        if method == "initialize":
            response = handle_initialize(message)
        elif method == "ping":
            response = make_result(request_id, {})
        elif method == "tools/list":
            response = handle_tools_list(message)
        elif method == "tools/call":
            response = handle_tools_call(message, client)
        else:
            logger.warning(f"Unknown method: {method}")
            response = make_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")
    except Exception as e:
        logger.exception(f"Unhandled error in {method}")
        response = make_error(request_id, INTERNAL_ERROR, f"Internal error: {e}")

    return None if is_notification else response


def serve(client: RemoteClient, stdin: TextIO, stdout: TextIO) -> None:
    """Process stdin line by line until EOF."""
    for line in stdin:
        line = line.strip()
        if not line:
            continue

        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            send_response(make_error(None, PARSE_ERROR, f"Parse error: {e}"), stdout)
            continue

        response = handle_message(message, client)
        if response is not None:
            send_response(response, stdout)


def main() -> None:
    """Bridge entry point: load config, then serve stdin until EOF."""
    setup_logging()

    try:
        config = load_endpoint_config()
    except ConfigurationError as e:
        logger.error(e.message)
        sys.exit(1)

    logger.info(f"SAR MCP bridge starting (stdio), API base: {config.base_url}")
    client = RemoteClient(config)

    try:
        serve(client, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Bridge interrupted")
    finally:
        client.session.close()
