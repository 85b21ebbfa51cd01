"""
Command-line lookup of a single address.

Prints the raw service response followed by the flattened addresses.

Run with: gmaps-geocode '<address>' ['<components>']
"""
import logging
import sys
from typing import List, Optional, Sequence

import httpx
from pydantic import TypeAdapter

from gmaps_geocode.config import Settings, get_settings
from gmaps_geocode.errors import GeocodeError
from gmaps_geocode.schemas.address import FlattenedAddress
from gmaps_geocode.schemas.request import GeocodeRequest
from gmaps_geocode.services.flattening import flatten
from gmaps_geocode.services.geocoding_service import GeocodingClient

logger = logging.getLogger(__name__)

PROG = "gmaps-geocode"

_flattened_adapter = TypeAdapter(List[FlattenedAddress])


def print_usage() -> None:
    print(f"Usage: {PROG} <address> [<components>]")
    print(f"Example: {PROG} 'Dortmunder Straße 2, Berlin, Germany'")
    print(f"Example: {PROG} 'Dortmunder Straße 2, Berlin' 'country:DE|postal_code:10555'")


def main(
    argv: Optional[Sequence[str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    Look up an address given on the command line.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]
        transport: HTTP transport for the lookup
        settings: Client settings, defaults to the environment settings

    Returns:
        Process exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print_usage()
        return 0

    settings = settings if settings is not None else get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    request = GeocodeRequest(
        language="EN",
        components=args[1] if len(args) == 2 else "",
        address=args[0],
    )

    try:
        with GeocodingClient(settings=settings, transport=transport) as client:
            response = client.lookup(request)
    except GeocodeError as e:
        logger.error(f"Google maps lookup error: {e}")
        return 1

    print("Result from google:")
    print(response.to_json(indent=2))

    parsed = flatten(response, include_partial_matches=True, require_street_number=False)
    print("Parsed result from google:")
    print(_flattened_adapter.dump_json(parsed, indent=2).decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
