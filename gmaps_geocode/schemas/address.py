"""Simplified address record derived from a geocoding result."""

from pydantic import BaseModel, ConfigDict, Field


class FlattenedAddress(BaseModel):
    """Address fields picked out of a result's address components."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
                "partial_match": False,
                "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
                "number": "1600",
                "premise": "",
                "street": "Amphitheatre Pkwy",
                "city": "Mountain View",
                "country": "US",
                "postcode": "94043",
                "lat": 37.4229181,
                "lng": -122.0854212
            }
        }
    )

    place_id: str = ""
    partial_match: bool = False
    formatted_address: str = Field("", description="Address as formatted by the service")
    number: str = Field("", description="Street number")
    premise: str = Field("", description="Named building or premise")
    street: str = ""
    city: str = ""
    country: str = Field("", description="Country code")
    postcode: str = ""
    lat: float = 0.0
    lng: float = 0.0
