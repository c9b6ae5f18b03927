"""Pytest config: PYTHONPATH, env and a deterministic in-memory gateway."""
import os
import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-key")

from utils.errors import AddressNotFound, GatewayError, NoRouteFound  # noqa: E402
from utils.models import (  # noqa: E402
    DistanceMatrixResult,
    ElevationSample,
    GeocodeResult,
    GeoPoint,
    Measure,
    PlaceDetails,
    PlaceSummary,
    ReverseGeocodeResult,
    RouteSummary,
)

KNOWN_ADDRESSES = {
    "Times Square": GeoPoint(lat=40.758, lng=-73.9855),
    "Central Park": GeoPoint(lat=40.7829, lng=-73.9654),
}


class FakeGateway:
    """Deterministic stand-in for GoogleMapsGateway that records its calls."""

    def __init__(self, places=None):
        self.calls = []
        self.places = places if places is not None else [
            PlaceSummary(name="Top Cafe", place_id="p1", location=GeoPoint(40.71, -74.0), rating=4.6),
            PlaceSummary(name="Ok Diner", place_id="p2", location=GeoPoint(40.72, -74.0), rating=3.9),
            PlaceSummary(name="New Spot", place_id="p3", location=GeoPoint(40.73, -74.0)),
            PlaceSummary(name="Solid Four", place_id="p4", location=GeoPoint(40.74, -74.0), rating=4.0),
        ]

    async def geocode(self, address):
        self.calls.append(("geocode", address))
        if address not in KNOWN_ADDRESSES:
            raise AddressNotFound(address)
        return GeocodeResult(
            location=KNOWN_ADDRESSES[address],
            formatted_address=f"{address}, New York, NY, USA",
            place_id=f"id-{address}",
        )

    async def reverse_geocode(self, point):
        self.calls.append(("reverse_geocode", point))
        return ReverseGeocodeResult(formatted_address="Somewhere", place_id="rev-1")

    async def nearby_search(self, center, keyword=None, radius=1000, open_now=False, min_rating=None):
        self.calls.append(("nearby_search", center, keyword, radius, open_now, min_rating))
        places = list(self.places)
        if min_rating is not None:
            places = [p for p in places if p.rating is not None and p.rating >= min_rating]
        return places

    async def place_details(self, place_id):
        self.calls.append(("place_details", place_id))
        if place_id == "nonexistent":
            raise GatewayError("Place details", "NOT_FOUND")
        return PlaceDetails(name="Top Cafe", address="1 Main St", rating=4.6)

    async def distance_matrix(self, origins, destinations, mode="driving"):
        self.calls.append(("distance_matrix", list(origins), list(destinations), mode))
        cell = Measure(value=1000, text="1 km")
        return DistanceMatrixResult(
            distances=[[cell for _ in destinations] for _ in origins],
            durations=[[Measure(value=120, text="2 mins") for _ in destinations] for _ in origins],
            origin_addresses=list(origins),
            destination_addresses=list(destinations),
        )

    async def directions(self, origin, destination, mode="driving"):
        self.calls.append(("directions", origin, destination, mode))
        if origin == destination == "nowhere":
            raise NoRouteFound(origin, destination)
        return RouteSummary(
            summary="Broadway",
            total_distance=Measure(value=2500, text="2.5 km"),
            total_duration=Measure(value=600, text="10 mins"),
        )

    async def elevation(self, points):
        self.calls.append(("elevation", list(points)))
        return [ElevationSample(elevation=10.0 * i, location=p) for i, p in enumerate(points)]


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def dispatcher(fake_gateway):
    from tools.dispatcher import Dispatcher

    return Dispatcher(fake_gateway)
