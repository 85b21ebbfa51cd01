"""Fixture payloads and builders shared by the test suites."""

import json
from typing import Any, Dict, List, Optional

import httpx


# Response captured from the service for "1600 Amphitheatre Parkway"
GOOGLE_RESPONSE = (
    '{"results": [ { "address_components": [ { "long_name": "1600", "short_name": "1600", '
    '"types": [ "street_number" ] }, { "long_name": "Amphitheatre Pkwy", "short_name": '
    '"Amphitheatre Pkwy", "types": [ "route" ] }, { "long_name": "Mountain View", '
    '"short_name": "Mountain View", "types": [ "locality", "political" ] }, { "long_name": '
    '"Santa Clara", "short_name": "Santa Clara", "types": [ "administrative_area_level_2", '
    '"political" ] }, { "long_name": "California", "short_name": "CA", "types": [ '
    '"administrative_area_level_1", "political" ] }, { "long_name": "United States", '
    '"short_name": "US", "types": [ "country", "political" ] }, { "long_name": "94043", '
    '"short_name": "94043", "types": [ "postal_code" ] } ], "formatted_address": '
    '"1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA", "geometry": { "location": { '
    '"lat": 37.4229181, "lng": -122.0854212 }, "location_type": "ROOFTOP", "viewport": { '
    '"northeast": { "lat": 37.42426708029149, "lng": -122.0840722197085 }, "southwest": { '
    '"lat": 37.4215691197085, "lng": -122.0867701802915 } } }, "types": [ "street_address" ] '
    '} ], "status": "OK" }\n'
)

# Same response re-encoded with the service's key order and no optional fields
GOOGLE_RESPONSE_ENCODED = (
    '{"status":"OK","error_message":"","results":[{"formatted_address":"1600 Amphitheatre '
    'Pkwy, Mountain View, CA 94043, USA","address_components":[{"long_name":"1600",'
    '"short_name":"1600","types":["street_number"]},{"long_name":"Amphitheatre Pkwy",'
    '"short_name":"Amphitheatre Pkwy","types":["route"]},{"long_name":"Mountain View",'
    '"short_name":"Mountain View","types":["locality","political"]},{"long_name":'
    '"Santa Clara","short_name":"Santa Clara","types":["administrative_area_level_2",'
    '"political"]},{"long_name":"California","short_name":"CA","types":'
    '["administrative_area_level_1","political"]},{"long_name":"United States",'
    '"short_name":"US","types":["country","political"]},{"long_name":"94043",'
    '"short_name":"94043","types":["postal_code"]}],"geometry":{"location":{"lat":'
    '37.4229181,"lng":-122.0854212},"location_type":"ROOFTOP","viewport":{"northeast":'
    '{"lat":37.42426708029149,"lng":-122.0840722197085},"southwest":{"lat":'
    '37.4215691197085,"lng":-122.0867701802915}}},"types":["street_address"]}]}'
)


def make_result(
    components: List[Dict[str, Any]],
    formatted_address: str = "Somewhere",
    partial_match: bool = False,
    place_id: str = "",
    lat: float = 52.52,
    lng: float = 13.405,
) -> Dict[str, Any]:
    """Build a raw result dictionary in the service's format."""
    result: Dict[str, Any] = {
        "address_components": components,
        "formatted_address": formatted_address,
        "geometry": {
            "location": {"lat": lat, "lng": lng},
            "location_type": "ROOFTOP",
            "viewport": {
                "northeast": {"lat": lat + 0.001, "lng": lng + 0.001},
                "southwest": {"lat": lat - 0.001, "lng": lng - 0.001},
            },
        },
        "types": ["street_address"],
    }
    if partial_match:
        result["partial_match"] = True
    if place_id:
        result["place_id"] = place_id
    return result


def part(long_name: str, *types: str, short_name: str = "") -> Dict[str, Any]:
    """Build a raw address component."""
    return {
        "long_name": long_name,
        "short_name": short_name or long_name,
        "types": list(types),
    }


def json_transport(
    payload: Any,
    status_code: int = 200,
    requests: Optional[List[httpx.Request]] = None,
) -> httpx.MockTransport:
    """Mock transport answering every request with a JSON payload."""
    body = payload if isinstance(payload, str) else json.dumps(payload)

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, text=body)

    return httpx.MockTransport(handler)


