"""Pydantic schemas for geocoding service responses.

Field names match the service's JSON keys and are declared in the order the
service documents them, so a decoded payload re-encodes to the same JSON.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    model_serializer,
)

# Integral floats below this magnitude are exact as ints
_MAX_EXACT_INTEGER = 2 ** 53


def format_coordinate(value: float) -> str:
    """Format a coordinate with the shortest decimal form that round-trips."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class GeocodeStatus(str, Enum):
    """Service-level status codes."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @property
    def is_error(self) -> bool:
        """Whether the status reports a failed lookup."""
        return self not in (GeocodeStatus.OK, GeocodeStatus.ZERO_RESULTS)


class Point(BaseModel):
    """Geographic coordinates."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "lat": 37.4229181,
                "lng": -122.0854212
            }
        }
    )

    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")

    def __str__(self) -> str:
        return f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"

    @field_serializer("lat", "lng", when_used="json")
    def _integral_as_int(self, value: float) -> Union[int, float]:
        # The service writes whole-number coordinates without a fraction
        if value.is_integer() and abs(value) < _MAX_EXACT_INTEGER:
            return int(value)
        return value


class Bounds(BaseModel):
    """Bounding box given by its northeast and southwest corners."""

    model_config = ConfigDict(frozen=True)

    northeast: Point
    southwest: Point

    def __str__(self) -> str:
        return f"{self.northeast}|{self.southwest}"


class AddressPart(BaseModel):
    """One component of a structured address."""

    model_config = ConfigDict(frozen=True)

    long_name: str = ""
    short_name: str = ""
    types: List[str] = Field(default_factory=list)


class Geometry(BaseModel):
    """Location, precision and extent of a result."""

    model_config = ConfigDict(frozen=True)

    bounds: Optional[Bounds] = Field(
        None,
        description="Precise bounds, absent unless the service sends them"
    )
    location: Point
    location_type: str = ""
    viewport: Bounds

    @model_serializer(mode="wrap")
    def _omit_missing_bounds(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if self.bounds is None:
            data.pop("bounds", None)
        return data


class Result(BaseModel):
    """A single geocoding match."""

    model_config = ConfigDict(frozen=True)

    formatted_address: str = ""
    address_components: List[AddressPart] = Field(default_factory=list)
    geometry: Geometry
    types: List[str] = Field(default_factory=list)
    partial_match: bool = False
    place_id: str = ""

    @model_serializer(mode="wrap")
    def _omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.partial_match:
            data.pop("partial_match", None)
        if not self.place_id:
            data.pop("place_id", None)
        return data


class GeocodeResponse(BaseModel):
    """Decoded geocoding service payload."""

    model_config = ConfigDict(frozen=True)

    status: GeocodeStatus
    error_message: str = ""
    results: List[Result] = Field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return self.status is GeocodeStatus.OK

    def to_json(self, indent: Optional[int] = None) -> str:
        """Encode the response with the service's key names."""
        return self.model_dump_json(indent=indent)
