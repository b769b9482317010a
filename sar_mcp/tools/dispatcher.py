"""
Tool Dispatcher

Validates tool arguments against the registry and performs the single
remote call each tool maps to.
"""

from typing import Any, Optional

from pydantic import ValidationError

from sar_mcp.configs import get_logger
from sar_mcp.exceptions import ToolValidationError
from sar_mcp.tools.envelope import json_tool_result
from sar_mcp.tools.registry import ToolDef, get_tool
from sar_mcp.utils.http_client import RemoteClient

logger = get_logger("tools")


def validate_arguments(tool: ToolDef, arguments: Optional[dict]) -> dict[str, Any]:
    """
    Validate arguments with the tool's input model.

    Returns:
        Validated arguments with defaults applied and unset optionals dropped

    Raises:
        ToolValidationError: Arguments don't satisfy the input model
    """
    if arguments is None:
        arguments = {}
    try:
        validated = tool.input_model.model_validate(arguments)
    except ValidationError as e:
        # The rejected input is the caller's own value and may not be JSON-safe (NaN)
        errors = [
            {key: value for key, value in err.items() if key != "input"}
            for err in e.errors(include_url=False, include_context=False)
        ]
        logger.warning(f"Tool {tool.name} validation failed: {errors}")
        raise ToolValidationError(tool.name, errors) from e
    return validated.model_dump(exclude_none=True)


def dispatch_tool(client: RemoteClient, name: Any, arguments: Optional[dict] = None) -> Any:
    """
    Run a tool: validate, then issue exactly one remote request.

    Args:
        client: Remote API client
        name: Registered tool name
        arguments: Raw tool arguments

    Returns:
        Remote JSON payload, unchanged

    Raises:
        UnknownToolError: Tool is not registered
        ToolValidationError: Arguments failed validation
        RemoteRequestError: Remote call failed
    """
    tool = get_tool(name)
    validated = validate_arguments(tool, arguments)
    path = tool.render_path(validated)

    logger.info(f"Calling tool: {tool.name} -> {tool.method} {path}")

    if tool.method == "GET":
        return client.request_json(path)

    body = {key: value for key, value in validated.items() if key not in tool.path_params}
    return client.request_json(path, method=tool.method, body=body)


def call_tool(client: RemoteClient, name: Any, arguments: Optional[dict] = None) -> dict[str, Any]:
    """Run a tool and wrap its payload in the tool result envelope."""
    return json_tool_result(dispatch_tool(client, name, arguments))
