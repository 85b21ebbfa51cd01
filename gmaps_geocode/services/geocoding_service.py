"""Geocoding lookups against the Google Geocoding API."""

import logging
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from gmaps_geocode.config import Settings, get_settings
from gmaps_geocode.errors import (
    DecodeError,
    HTTPStatusError,
    InvalidRequestError,
    ServiceError,
    TransportError,
)
from gmaps_geocode.schemas.geocoding import GeocodeResponse
from gmaps_geocode.schemas.request import GeocodeRequest
from gmaps_geocode.services.query_builder import PreparedRequest, redact_parameters

logger = logging.getLogger(__name__)


class GeocodingClient:
    """
    Client for the geocoding service.

    Each lookup is a single GET request: no retries, no caching and no
    rate limiting. Failures are raised as GeocodeError subclasses.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize geocoding client.

        Args:
            settings: Client settings, defaults to the environment settings
            transport: Transport for the internally created HTTP client
                (httpx's default transport when None)
            http_client: Caller-owned HTTP client; takes precedence over
                transport and is never closed by this object
        """
        self.settings = settings if settings is not None else get_settings()
        if http_client is not None:
            self._http_client = http_client
            self._owns_http_client = False
        else:
            self._http_client = httpx.Client(
                transport=transport,
                timeout=self.settings.timeout,
                follow_redirects=True,
            )
            self._owns_http_client = True

    def __enter__(self) -> "GeocodingClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_http_client:
            self._http_client.close()

    def with_defaults(self, request: GeocodeRequest) -> GeocodeRequest:
        """
        Fill empty request fields from settings.

        Credentials are only taken from settings when the request carries
        neither a client identifier nor an API key.
        """
        update: Dict[str, str] = {}
        if not request.client and not request.api_key:
            if self.settings.client:
                update["client"] = self.settings.client
                if not request.signature and self.settings.signature:
                    update["signature"] = self.settings.signature
            elif self.settings.api_key:
                update["api_key"] = self.settings.api_key
        if not request.channel and self.settings.channel:
            update["channel"] = self.settings.channel
        if not request.language and self.settings.language:
            update["language"] = self.settings.language

        if not update:
            return request
        return request.model_copy(update=update)

    def lookup(self, request: Union[GeocodeRequest, PreparedRequest]) -> GeocodeResponse:
        """
        Perform a geocoding lookup.

        A PreparedRequest is sent as is; a plain request is first completed
        with defaults from settings.

        Args:
            request: Request description or prepared request

        Returns:
            Decoded response; status is OK or ZERO_RESULTS

        Raises:
            InvalidRequestError: If neither address nor location is set
            TransportError: If the network call fails
            HTTPStatusError: If the service answers with a non-2xx status
            DecodeError: If the body is not a valid geocoding payload
            ServiceError: If the service reports a failure status
        """
        if isinstance(request, PreparedRequest):
            prepared = request
        else:
            prepared = PreparedRequest(self.with_defaults(request))

        if prepared.is_empty:
            logger.warning("Geocoding lookup rejected: no address or location")
            raise InvalidRequestError("Missing address or latlng argument")

        url = prepared.url(self.settings.endpoint)
        logger.info(f"Geocoding lookup: {redact_parameters(prepared.parameters)}")

        try:
            response = self._http_client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Geocoding request error: {e}")
            raise TransportError("Geocoding request failed", cause=e) from e

        if not response.is_success:
            logger.error(
                f"Geocoding upstream HTTP error {response.status_code}: {response.text}"
            )
            raise HTTPStatusError(
                f"Failed to lookup address (code {response.status_code})",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            result = GeocodeResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Invalid response from geocoding service: {e}")
            raise DecodeError("Invalid response from geocoding service", cause=e) from e

        if result.status.is_error:
            logger.warning(
                f"Geocoding failed with status '{result.status.value}' "
                f"and message '{result.error_message}'"
            )
            raise ServiceError(
                f"Lookup failed ({result.status.value})"
                + (f": {result.error_message}" if result.error_message else ""),
                status=result.status.value,
                error_message=result.error_message,
            )

        logger.info(
            f"Geocoding lookup finished with status {result.status.value}, "
            f"{len(result.results)} result(s)"
        )
        return result

    def geocode(self, address: str, components: str = "") -> GeocodeResponse:
        """Look up a free-form address, optionally filtered by components."""
        return self.lookup(GeocodeRequest(address=address, components=components))


def lookup(
    request: Union[GeocodeRequest, PreparedRequest],
    transport: Optional[httpx.BaseTransport] = None,
    settings: Optional[Settings] = None,
) -> GeocodeResponse:
    """
    Perform a single geocoding lookup with a short-lived client.

    Args:
        request: Request description or prepared request
        transport: HTTP transport, httpx's default when None
        settings: Client settings, defaults to the environment settings

    Returns:
        Decoded response
    """
    with GeocodingClient(settings=settings, transport=transport) as client:
        return client.lookup(request)
