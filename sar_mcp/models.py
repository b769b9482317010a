"""
Remote SAR API Payload Models

Response shapes returned by the remote SAR REST API. The bridge forwards
payloads verbatim; these models exist for callers that want typed access
(e.g. decoding a route's polyline) and reject nothing they don't know about.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from sar_mcp.utils.polyline import decode_polyline


class RemoteModel(BaseModel):
    """Base for remote payloads: unknown fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


class SarEvent(RemoteModel):
    eventId: str
    text: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    createdAt: Optional[float] = None  # epoch milliseconds
    mediaUrl: Optional[str] = None
    severity: Optional[float] = None
    trust: Optional[float] = None
    rationale: Optional[str] = None


class ListEventsResponse(RemoteModel):
    events: list[SarEvent]


class IngestEventResponse(RemoteModel):
    eventId: str


class TraceStep(RemoteModel):
    tool: str
    ms: float


class ExplainEventResponse(RemoteModel):
    eventId: str
    rationale: str
    cues: Optional[list[str]] = None
    trustScore: Optional[float] = None
    trace: Optional[list[TraceStep]] = None


class LatLng(RemoteModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class AltRouteLeg(RemoteModel):
    distanceMeters: Optional[float] = None
    duration: Optional[str] = None
    start: Optional[LatLng] = None
    end: Optional[LatLng] = None


class AltRouteResponse(RemoteModel):
    distanceKm: float
    etaMin: float
    polyline: Optional[str] = None
    legs: Optional[list[AltRouteLeg]] = None

    def coordinates(self) -> list[tuple[float, float]]:
        """Decoded route geometry as (lat, lon) tuples; empty without a polyline."""
        return decode_polyline(self.polyline)


class GeofenceResponse(RemoteModel):
    delivered: int


class SimulateReplayResponse(RemoteModel):
    started: bool
    count: int


def route_coordinates(payload: dict) -> list[tuple[float, float]]:
    """
    Decode the polyline of an alt_route payload.

    Args:
        payload: Raw JSON returned by /routes/alt

    Returns:
        List of (lat, lon) tuples
    """
    return AltRouteResponse.model_validate(payload).coordinates()


# Response model for each bridged tool
RESPONSE_MODELS: dict[str, type[RemoteModel]] = {
    "ingest_event": IngestEventResponse,
    "list_events": ListEventsResponse,
    "explain_event": ExplainEventResponse,
    "alt_route": AltRouteResponse,
    "set_geofence_alert": GeofenceResponse,
    "simulate_replay": SimulateReplayResponse,
}


def parse_payload(tool_name: str, payload: dict) -> RemoteModel:
    """
    Parse a tool's raw remote payload into its typed model.

    Raises:
        KeyError: Unknown tool name
        pydantic.ValidationError: Payload doesn't match the documented shape
    """
    return RESPONSE_MODELS[tool_name].model_validate(payload)
