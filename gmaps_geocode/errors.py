"""Typed errors raised by the geocoding client.

Every failure of a lookup surfaces as one of these, raised directly to
the caller. All errors inherit from GeocodeError and can optionally
wrap the exception that caused them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class GeocodeError(Exception):
    """Base error for the geocoding client.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(eq=False)
class InvalidRequestError(GeocodeError):
    """The request has no address and no location, or has both."""


@dataclass(eq=False)
class TransportError(GeocodeError):
    """The network call itself failed (DNS, connect, TLS, timeout)."""


@dataclass(eq=False)
class HTTPStatusError(GeocodeError):
    """The service answered with a non-2xx HTTP status.

    Attributes:
        status_code: HTTP status code of the response
        body: Raw response body
    """

    status_code: int = 0
    body: str = ""


@dataclass(eq=False)
class DecodeError(GeocodeError):
    """The response body is not a valid geocoding JSON payload."""


@dataclass(eq=False)
class ServiceError(GeocodeError):
    """The service reported a failure status in a successful HTTP response.

    ZERO_RESULTS is never reported through this error.

    Attributes:
        status: Service status string, e.g. OVER_QUERY_LIMIT
        error_message: The service's error_message field, possibly empty
    """

    status: str = ""
    error_message: str = ""
