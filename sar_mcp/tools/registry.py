"""
Tool Registry

Static table of the six bridged tools: name, input model, HTTP method and
path template. Built once at import and never mutated.
"""

import re
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel

from sar_mcp.exceptions import UnknownToolError
from sar_mcp.tools.schemas import (
    AltRouteInput,
    ExplainEventInput,
    GeofenceAlertInput,
    IngestEventInput,
    ListEventsInput,
    SimulateReplayInput,
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ToolDef:
    """Definition of a bridged tool: input contract plus remote route."""

    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    method: Literal["GET", "POST"]
    path_template: str

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER.findall(self.path_template)

    def render_path(self, arguments: dict[str, Any]) -> str:
        """Substitute {placeholders} with URL-encoded argument values."""
        return _PLACEHOLDER.sub(
            lambda m: quote(str(arguments[m.group(1)]), safe=_URI_COMPONENT_SAFE),
            self.path_template,
        )

    def schema(self) -> dict:
        """Generate MCP-compatible JSON schema for this tool."""
        json_schema = self.input_model.model_json_schema()
        # Remove Pydantic metadata that MCP doesn't need
        json_schema.pop("title", None)
        for prop in json_schema.get("properties", {}).values():
            prop.pop("title", None)
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": json_schema,
        }


TOOLS: tuple[ToolDef, ...] = (
    ToolDef(
        name="ingest_event",
        title="Ingest Event",
        description="Create a new disaster event report in the SAR system.",
        input_model=IngestEventInput,
        method="POST",
        path_template="/ingest",
    ),
    ToolDef(
        name="list_events",
        title="List Events",
        description="Retrieve the catalog of recent disaster events.",
        input_model=ListEventsInput,
        method="GET",
        path_template="/events",
    ),
    ToolDef(
        name="explain_event",
        title="Explain Event",
        description="Fetch the Nova Lite rationale for a specific event.",
        input_model=ExplainEventInput,
        method="GET",
        path_template="/events/{eventId}/explain",
    ),
    ToolDef(
        name="alt_route",
        title="Generate Alternate Route",
        description="Request a detour route between two coordinate pairs.",
        input_model=AltRouteInput,
        method="POST",
        path_template="/routes/alt",
    ),
    ToolDef(
        name="set_geofence_alert",
        title="Set Geofence Alert",
        description="Deliver a geofence alert for responders within a radius.",
        input_model=GeofenceAlertInput,
        method="POST",
        path_template="/alerts/geofence",
    ),
    ToolDef(
        name="simulate_replay",
        title="Simulate Event Replay",
        description="Trigger the backend to replay demo SAR events.",
        input_model=SimulateReplayInput,
        method="POST",
        path_template="/simulate/replay",
    ),
)

TOOL_REGISTRY: dict[str, ToolDef] = {tool.name: tool for tool in TOOLS}


def get_tool(name: Any) -> ToolDef:
    """
    Look up a tool by name.

    Raises:
        UnknownToolError: Name is not registered
    """
    tool = TOOL_REGISTRY.get(name) if isinstance(name, str) else None
    if tool is None:
        raise UnknownToolError(name)
    return tool


def list_tool_schemas() -> list[dict]:
    """Tool definitions in MCP tools/list format, in registration order."""
    return [tool.schema() for tool in TOOLS]
