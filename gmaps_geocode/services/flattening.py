"""Flattening of geocoding results into simplified address records."""

from typing import Dict, List, Tuple

from gmaps_geocode.schemas.address import FlattenedAddress
from gmaps_geocode.schemas.geocoding import GeocodeResponse, GeocodeStatus, Result

# Address component tag -> (FlattenedAddress field, AddressPart attribute)
TAG_FIELDS: Dict[str, Tuple[str, str]] = {
    "street_number": ("number", "long_name"),
    "premise": ("premise", "long_name"),
    "route": ("street", "short_name"),
    "locality": ("city", "long_name"),
    "postal_town": ("city", "long_name"),
    "country": ("country", "short_name"),
    "postal_code": ("postcode", "long_name"),
}


def flatten_result(result: Result) -> FlattenedAddress:
    """
    Build a flattened address from a single result.

    Parts are scanned in order, so a later part overwrites an earlier one
    carrying the same tag.
    """
    fields: Dict[str, str] = {}
    for part in result.address_components:
        for tag in part.types:
            mapping = TAG_FIELDS.get(tag)
            if mapping is None:
                continue
            field_name, attribute = mapping
            fields[field_name] = getattr(part, attribute)

    location = result.geometry.location
    return FlattenedAddress(
        place_id=result.place_id,
        partial_match=result.partial_match,
        formatted_address=result.formatted_address,
        lat=location.lat,
        lng=location.lng,
        **fields,
    )


def flatten(
    response: GeocodeResponse,
    include_partial_matches: bool,
    require_street_number: bool,
) -> List[FlattenedAddress]:
    """
    Flatten a response into simplified address records.

    A response whose status is not OK yields an empty list.

    Args:
        response: Decoded geocoding response
        include_partial_matches: Keep results flagged as partial matches
        require_street_number: Drop records with neither a street number
            nor a premise

    Returns:
        Flattened addresses in the order of the retained results
    """
    if response.status is not GeocodeStatus.OK:
        return []

    addresses: List[FlattenedAddress] = []
    for result in response.results:
        if result.partial_match and not include_partial_matches:
            continue
        address = flatten_result(result)
        if require_street_number and not (address.number or address.premise):
            continue
        addresses.append(address)
    return addresses
