"""Schema describing a single geocoding lookup."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gmaps_geocode.schemas.geocoding import Bounds, Point


class GeocodeRequest(BaseModel):
    """
    Description of a geocoding lookup.

    Exactly one of ``address`` and ``location`` must be set. This is only
    checked when the request is encoded, so an incomplete request can be
    built up field by field.

    When ``client`` is set the client/signature pair is sent and
    ``api_key`` is ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "address": "1600 Amphitheatre Parkway, Mountain View, CA",
                "components": "country:US",
                "language": "en"
            }
        }
    )

    address: str = Field("", description="Free-form postal address")
    location: Optional[Point] = Field(None, description="Coordinate to look up")

    bounds: Optional[Bounds] = Field(None, description="Viewport used to bias results")
    region: str = Field("", description="Region bias code, e.g. 'uk'")
    language: str = Field("", description="Response language")
    components: str = Field("", description="Component filters, e.g. 'country:DE|postal_code:10555'")
    channel: str = Field("", description="Channel tag for usage reporting")
    sensor: bool = Field(False, description="Legacy sensor flag")

    client: str = Field("", description="Premium plan client identifier")
    signature: str = Field("", description="URL signature for the client identifier")
    api_key: str = Field("", description="Plain API key")

    @property
    def has_target(self) -> bool:
        """Whether an address or a location is set."""
        return bool(self.address) or self.location is not None
