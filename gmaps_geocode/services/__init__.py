"""Query building, lookup and flattening services."""
from gmaps_geocode.services.flattening import flatten, flatten_result
from gmaps_geocode.services.geocoding_service import GeocodingClient, lookup
from gmaps_geocode.services.query_builder import (
    PreparedRequest,
    build_parameters,
    encode_parameters,
)

__all__ = [
    "GeocodingClient",
    "PreparedRequest",
    "build_parameters",
    "encode_parameters",
    "flatten",
    "flatten_result",
    "lookup",
]
