#!/usr/bin/env python3
"""
Geographic utilities for the maps tools.
Handles coordinate parsing and resolution of location inputs to points.
"""

from utils.errors import AddressNotFound, InvalidCoordinateFormat
from utils.models import GeoPoint, LocationInput


def parse_latlon(s):
    """Parse a 'lat,lng' string into a GeoPoint."""
    parts = s.split(",") if isinstance(s, str) else []
    # float() accepts digit separators like "4_0"
    if len(parts) != 2 or "_" in s:
        raise InvalidCoordinateFormat()
    try:
        lat, lng = float(parts[0].strip()), float(parts[1].strip())
    except ValueError:
        raise InvalidCoordinateFormat() from None
    return GeoPoint(lat=lat, lng=lng)


async def resolve_location(gateway, location: LocationInput) -> GeoPoint:
    """
    Resolve a location input to a point.
    Coordinates are parsed locally; anything else is geocoded and the first
    match wins.
    """
    if location.is_coordinates:
        return parse_latlon(location.value)

    result = await gateway.geocode(location.value)
    if result is None:
        raise AddressNotFound(location.value)
    return result.location
