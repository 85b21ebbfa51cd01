"""Query parameter assembly for geocoding requests."""

import logging
from typing import List, Optional, Tuple
from urllib.parse import urlencode

import httpx

from gmaps_geocode.errors import InvalidRequestError
from gmaps_geocode.schemas.request import GeocodeRequest

logger = logging.getLogger(__name__)

# Parameters whose values must never reach the logs
SECRET_PARAMETERS = frozenset({"key", "signature"})


def build_parameters(request: GeocodeRequest) -> httpx.QueryParams:
    """
    Build the query parameters for a geocoding request.

    Keys are sorted so the encoded form of a request never changes.

    Args:
        request: Request description

    Returns:
        QueryParams, empty when neither address nor location is set

    Raises:
        InvalidRequestError: If both address and location are set
    """
    if request.address and request.location is not None:
        raise InvalidRequestError(
            "Address and location are mutually exclusive; set only one"
        )

    items: List[Tuple[str, str]] = []
    if request.address:
        items.append(("address", request.address))
    elif request.location is not None:
        items.append(("latlng", str(request.location)))
    else:
        logger.debug("Request has neither address nor location")
        return httpx.QueryParams()

    if request.channel:
        items.append(("channel", request.channel))
    if request.bounds is not None:
        items.append(("bounds", str(request.bounds)))
    if request.region:
        items.append(("region", request.region))
    if request.language:
        items.append(("language", request.language))
    if request.components:
        items.append(("components", request.components))

    # A client identifier takes precedence over a plain API key
    if request.client:
        items.append(("client", request.client))
        if request.signature:
            items.append(("signature", request.signature))
    elif request.api_key:
        items.append(("key", request.api_key))

    items.append(("sensor", "true" if request.sensor else "false"))

    return httpx.QueryParams(sorted(items))


def encode_parameters(params: httpx.QueryParams) -> str:
    """URL-encode parameters in order, spaces as '+'."""
    return urlencode(params.multi_items())


def redact_parameters(params: httpx.QueryParams) -> str:
    """Encode parameters for logging with credential values masked."""
    return urlencode([
        (key, "***" if key in SECRET_PARAMETERS else value)
        for key, value in params.multi_items()
    ])


class PreparedRequest:
    """
    Caller-held memo of a request's encoded parameters.

    Parameters are built on first access and reused afterwards. Instances
    are not safe for concurrent use; give each thread its own.
    """

    def __init__(self, request: GeocodeRequest):
        self.request = request
        self._parameters: Optional[httpx.QueryParams] = None

    @property
    def parameters(self) -> httpx.QueryParams:
        if self._parameters is None:
            self._parameters = build_parameters(self.request)
        return self._parameters

    @property
    def query_string(self) -> str:
        return encode_parameters(self.parameters)

    @property
    def is_empty(self) -> bool:
        return len(self.parameters) == 0

    def url(self, endpoint: str) -> str:
        """Full lookup URL for the given endpoint."""
        return f"{endpoint}?{self.query_string}"
