"""Client for the Google Geocoding API."""
from gmaps_geocode.config import Settings, get_settings
from gmaps_geocode.errors import (
    DecodeError,
    GeocodeError,
    HTTPStatusError,
    InvalidRequestError,
    ServiceError,
    TransportError,
)
from gmaps_geocode.schemas import (
    AddressPart,
    Bounds,
    FlattenedAddress,
    GeocodeRequest,
    GeocodeResponse,
    GeocodeStatus,
    Geometry,
    Point,
    Result,
)
from gmaps_geocode.services import (
    GeocodingClient,
    PreparedRequest,
    build_parameters,
    encode_parameters,
    flatten,
    lookup,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "DecodeError",
    "GeocodeError",
    "HTTPStatusError",
    "InvalidRequestError",
    "ServiceError",
    "TransportError",
    # Schemas
    "AddressPart",
    "Bounds",
    "FlattenedAddress",
    "GeocodeRequest",
    "GeocodeResponse",
    "GeocodeStatus",
    "Geometry",
    "Point",
    "Result",
    # Services
    "GeocodingClient",
    "PreparedRequest",
    "build_parameters",
    "encode_parameters",
    "flatten",
    "lookup",
]
