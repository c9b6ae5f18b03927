#!/usr/bin/env python3
"""
Result records for the maps tools.
Each gateway operation returns one of these; OperationResult is the envelope
every dispatched call returns.
"""

import math
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, List, Optional

from utils.errors import InvalidCoordinateFormat


@dataclass(frozen=True)
class GeoPoint:
    """A resolved latitude/longitude pair."""

    lat: float
    lng: float

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise InvalidCoordinateFormat("Coordinates must be finite numbers")
        if not -90 <= self.lat <= 90:
            raise InvalidCoordinateFormat(
                f"Latitude {self.lat:g} out of range, expected -90 to 90"
            )
        if not -180 <= self.lng <= 180:
            raise InvalidCoordinateFormat(
                f"Longitude {self.lng:g} out of range, expected -180 to 180"
            )

    def as_param(self):
        """Format as the provider's 'lat,lng' query value."""
        return f"{self.lat},{self.lng}"


@dataclass(frozen=True)
class LocationInput:
    """A caller-supplied location before resolution."""

    value: str
    is_coordinates: bool = False


@dataclass(frozen=True)
class Measure:
    """Distance (meters) or duration (seconds) with the provider's display text."""

    value: float
    text: str


@dataclass(frozen=True)
class PlaceSummary:
    name: str
    place_id: str
    location: GeoPoint
    address: Optional[str] = None
    rating: Optional[float] = None
    total_ratings: Optional[int] = None
    open_now: Optional[bool] = None


@dataclass(frozen=True)
class PlaceReview:
    rating: Optional[float] = None
    text: Optional[str] = None
    time: Optional[int] = None
    author_name: Optional[str] = None


@dataclass(frozen=True)
class PlaceDetails:
    name: Optional[str] = None
    address: Optional[str] = None
    location: Optional[GeoPoint] = None
    rating: Optional[float] = None
    total_ratings: Optional[int] = None
    open_now: Optional[bool] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    price_level: Optional[int] = None
    reviews: List[PlaceReview] = field(default_factory=list)


@dataclass(frozen=True)
class GeocodeResult:
    location: GeoPoint
    formatted_address: str
    place_id: str


@dataclass(frozen=True)
class AddressComponent:
    long_name: str
    short_name: str
    types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ReverseGeocodeResult:
    formatted_address: str
    place_id: str
    address_components: List[AddressComponent] = field(default_factory=list)


@dataclass(frozen=True)
class DistanceMatrixResult:
    """Distances and durations indexed [origin][destination]; None where the pair failed."""

    distances: List[List[Optional[Measure]]]
    durations: List[List[Optional[Measure]]]
    origin_addresses: List[str]
    destination_addresses: List[str]


@dataclass(frozen=True)
class RouteStep:
    instruction: str
    distance: Measure
    duration: Measure
    travel_mode: str


@dataclass(frozen=True)
class RouteLeg:
    start_address: str
    end_address: str
    distance: Measure
    duration: Measure
    steps: List[RouteStep] = field(default_factory=list)


@dataclass(frozen=True)
class RouteSummary:
    summary: str
    total_distance: Measure
    total_duration: Measure
    polyline: Optional[str] = None
    legs: List[RouteLeg] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ElevationSample:
    elevation: float
    location: GeoPoint
    resolution: Optional[float] = None


def to_jsonable(value: Any) -> Any:
    """Convert records (and lists of them) into plain JSON-compatible values."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


@dataclass(frozen=True)
class OperationResult:
    """Uniform envelope: success carries data, failure carries an error message."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    location: Optional[GeoPoint] = None

    @classmethod
    def ok(cls, data, location=None):
        return cls(success=True, data=data, location=location)

    @classmethod
    def failure(cls, error):
        return cls(success=False, error=error or "Unknown error")

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        if not self.success:
            return {"success": False, "error": self.error}
        result = {"success": True, "data": to_jsonable(self.data)}
        if self.location is not None:
            result["location"] = to_jsonable(self.location)
        return result
