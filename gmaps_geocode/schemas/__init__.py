"""Pydantic schemas for requests, responses and flattened addresses."""
from gmaps_geocode.schemas.address import FlattenedAddress
from gmaps_geocode.schemas.geocoding import (
    AddressPart,
    Bounds,
    GeocodeResponse,
    GeocodeStatus,
    Geometry,
    Point,
    Result,
    format_coordinate,
)
from gmaps_geocode.schemas.request import GeocodeRequest

__all__ = [
    # Request schemas
    "GeocodeRequest",
    # Response schemas
    "AddressPart",
    "Bounds",
    "GeocodeResponse",
    "GeocodeStatus",
    "Geometry",
    "Point",
    "Result",
    "format_coordinate",
    # Flattened address
    "FlattenedAddress",
]
