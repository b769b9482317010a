"""
Tool Input Models

Pydantic models are the single source of truth for tool input validation
and for the JSON Schema advertised in tools/list.

Numbers are strict and finite: strings, booleans, NaN and infinities are
rejected rather than coerced. Unknown argument keys are ignored.
"""

from typing import Annotated, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    TypeAdapter,
    ValidationError,
    WithJsonSchema,
    field_validator,
)

from sar_mcp.configs.constants import (
    DEFAULT_DESTINATION,
    DEFAULT_GEOFENCE_RADIUS_KM,
    DEFAULT_ORIGIN,
)

_url_adapter = TypeAdapter(AnyUrl)

# Kept as the caller's string; the schema still advertises a URI
UriString = Annotated[str, WithJsonSchema({"type": "string", "format": "uri"})]


class ToolInput(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


# 1. ingest_event
class IngestEventInput(ToolInput):
    text: str = Field(..., min_length=3, description="Free-text field report (at least 3 characters)")
    lat: Optional[StrictFloat] = Field(None, description="Latitude of the report")
    lon: Optional[StrictFloat] = Field(None, description="Longitude of the report")
    mediaUrl: Optional[UriString] = Field(None, description="URL of a photo or video attached to the report")

    @field_validator("mediaUrl")
    @classmethod
    def _check_media_url(cls, value: Optional[str]) -> Optional[str]:
        # Validated as a URL but forwarded exactly as given
        if value is None:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("mediaUrl must be a valid URL")
        return value


# 2. list_events
class ListEventsInput(ToolInput):
    pass


# 3. explain_event
class ExplainEventInput(ToolInput):
    eventId: str = Field(..., min_length=1, description="Identifier returned by ingest_event")


# 4. alt_route
class AltRouteInput(ToolInput):
    originLat: StrictFloat = Field(DEFAULT_ORIGIN[0], description="Origin latitude")
    originLon: StrictFloat = Field(DEFAULT_ORIGIN[1], description="Origin longitude")
    destLat: StrictFloat = Field(DEFAULT_DESTINATION[0], description="Destination latitude")
    destLon: StrictFloat = Field(DEFAULT_DESTINATION[1], description="Destination longitude")


# 5. set_geofence_alert
class GeofenceAlertInput(ToolInput):
    lat: StrictFloat = Field(DEFAULT_ORIGIN[0], description="Geofence center latitude")
    lon: StrictFloat = Field(DEFAULT_ORIGIN[1], description="Geofence center longitude")
    radiusKm: StrictFloat = Field(DEFAULT_GEOFENCE_RADIUS_KM, description="Alert radius in kilometers")


# 6. simulate_replay
class SimulateReplayInput(ToolInput):
    pass
