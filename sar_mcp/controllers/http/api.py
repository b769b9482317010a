"""
Dashboard Proxy Endpoints

Server-side routes the mission console calls. Each one forwards through the
tool dispatcher, so the proxy and the bridge share one validation and
routing table.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Request

from sar_mcp.configs import get_logger
from sar_mcp.configs.runtime import MISSING_BASE_URL_MESSAGE
from sar_mcp.controllers.http.errors import backend_error_response
from sar_mcp.exceptions import MissingConfigError, SarError
from sar_mcp.tools import dispatch_tool
from sar_mcp.utils.http_client import RemoteClient

logger = get_logger("http.api")

router = APIRouter()


def _client(request: Request) -> RemoteClient:
    client: Optional[RemoteClient] = request.app.state.client
    if client is None:
        raise MissingConfigError(MISSING_BASE_URL_MESSAGE)
    return client


def _forward(request: Request, tool_name: str, arguments: Any, fallback_message: str):
    logger.info(f"Proxy call: {tool_name}")
    try:
        return dispatch_tool(_client(request), tool_name, arguments)
    except SarError as e:
        return backend_error_response(e, fallback_message)


# --- Endpoints ---


@router.post("/ingest")
def ingest_event(request: Request, payload: Any = Body(None)):
    """Create a new event report."""
    return _forward(request, "ingest_event", payload, "Failed to ingest event")


@router.get("/events")
def list_events(request: Request):
    """List recent events."""
    return _forward(request, "list_events", {}, "Failed to load events")


@router.get("/events/{event_id}/explain")
def explain_event(request: Request, event_id: str):
    """Fetch the AI rationale for one event."""
    return _forward(request, "explain_event", {"eventId": event_id}, "Failed to fetch event explanation")


@router.post("/routes/alt")
def alt_route(request: Request, payload: Any = Body(None)):
    """Request an alternate route between two coordinates."""
    return _forward(request, "alt_route", payload, "Failed to fetch alternate route")


@router.post("/alerts/geofence")
def geofence_alert(request: Request, payload: Any = Body(None)):
    """Deliver a geofence alert."""
    return _forward(request, "set_geofence_alert", payload, "Failed to set geofence alert")


@router.post("/simulate/replay")
def simulate_replay(request: Request):
    """Start the demo event replay."""
    return _forward(request, "simulate_replay", {}, "Failed to start replay simulation")
