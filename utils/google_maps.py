#!/usr/bin/env python3
"""
Google Maps gateway for the maps tools.
One HTTP round trip per operation against the Google Maps web services,
with the provider payload projected into the records in utils.models.
"""

import logging
from typing import List, Optional, Sequence

import httpx

from config import Config
from utils.errors import AddressNotFound, GatewayError, NoRouteFound
from utils.models import (
    AddressComponent,
    DistanceMatrixResult,
    ElevationSample,
    GeocodeResult,
    GeoPoint,
    Measure,
    PlaceDetails,
    PlaceReview,
    PlaceSummary,
    ReverseGeocodeResult,
    RouteLeg,
    RouteStep,
    RouteSummary,
)

logger = logging.getLogger(__name__)

PLACE_DETAIL_FIELDS = (
    "name",
    "rating",
    "formatted_address",
    "opening_hours",
    "reviews",
    "geometry",
    "formatted_phone_number",
    "website",
    "price_level",
    "user_ratings_total",
)


def _point(raw):
    return GeoPoint(lat=float(raw["lat"]), lng=float(raw["lng"]))


def _measure(raw):
    return Measure(value=raw.get("value", 0), text=raw.get("text", ""))


def _place_summary(place):
    return PlaceSummary(
        name=place.get("name", ""),
        place_id=place.get("place_id", ""),
        address=place.get("formatted_address") or place.get("vicinity"),
        location=_point(place["geometry"]["location"]),
        rating=place.get("rating"),
        total_ratings=place.get("user_ratings_total"),
        open_now=(place.get("opening_hours") or {}).get("open_now"),
    )


class GoogleMapsGateway:
    """Async client for the Google Maps Places, Geocoding, Routes and Elevation APIs."""

    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        language: str = Config.MAPS_LANGUAGE,
        base_url: str = Config.MAPS_API_BASE,
    ):
        self.api_key = api_key
        self.language = language
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            timeout = httpx.Timeout(
                Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT
            )
            headers = {"User-Agent": Config.USER_AGENT}
            self._client = httpx.AsyncClient(timeout=timeout, headers=headers)
        return self._client

    async def aclose(self):
        """Close the HTTP client if this gateway created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _get(self, operation, path, params):
        """GET a provider endpoint and return the decoded JSON body."""
        url = f"{self.base_url}/{path}"
        query = {k: v for k, v in params.items() if v is not None}
        query["key"] = self.api_key
        logger.debug(f"{operation}: GET {url}")
        try:
            r = await self.client.get(url, params=query)
            r.raise_for_status()
            return r.json()
        except httpx.HTTPError as e:
            logger.warning(f"{operation} request error: {e}")
            raise GatewayError(operation, "REQUEST_FAILED", str(e)) from e
        except ValueError as e:
            raise GatewayError(operation, "REQUEST_FAILED", "invalid JSON response") from e

    @staticmethod
    def _check_status(operation, body, accepted=("OK",)):
        status = body.get("status", "UNKNOWN_ERROR")
        if status not in accepted:
            raise GatewayError(operation, status, body.get("error_message"))
        return status

    async def nearby_search(
        self,
        center: GeoPoint,
        keyword: Optional[str] = None,
        radius: float = Config.DEFAULT_RADIUS,
        open_now: bool = False,
        min_rating: Optional[float] = None,
    ) -> List[PlaceSummary]:
        """
        Search places around a point.
        The provider has no minimum-rating filter, so min_rating is applied to
        the returned page; places without a rating are dropped once it is set.
        """
        body = await self._get(
            "Nearby search",
            "place/nearbysearch/json",
            {
                "location": center.as_param(),
                "radius": radius,
                "keyword": keyword,
                "opennow": "true" if open_now else None,
                "language": self.language,
            },
        )
        self._check_status("Nearby search", body, accepted=("OK", "ZERO_RESULTS"))

        places = [_place_summary(p) for p in body.get("results", [])]
        if min_rating is not None:
            places = [
                p for p in places if p.rating is not None and p.rating >= min_rating
            ]
        return places

    async def place_details(self, place_id: str) -> PlaceDetails:
        body = await self._get(
            "Place details",
            "place/details/json",
            {
                "place_id": place_id,
                "fields": ",".join(PLACE_DETAIL_FIELDS),
                "language": self.language,
            },
        )
        self._check_status("Place details", body)

        details = body.get("result") or {}
        location = (details.get("geometry") or {}).get("location")
        return PlaceDetails(
            name=details.get("name"),
            address=details.get("formatted_address"),
            location=_point(location) if location else None,
            rating=details.get("rating"),
            total_ratings=details.get("user_ratings_total"),
            open_now=(details.get("opening_hours") or {}).get("open_now"),
            phone=details.get("formatted_phone_number"),
            website=details.get("website"),
            price_level=details.get("price_level"),
            reviews=[
                PlaceReview(
                    rating=review.get("rating"),
                    text=review.get("text"),
                    time=review.get("time"),
                    author_name=review.get("author_name"),
                )
                for review in details.get("reviews") or []
            ],
        )

    async def geocode(self, address: str) -> GeocodeResult:
        body = await self._get(
            "Geocoding",
            "geocode/json",
            {"address": address, "language": self.language},
        )
        status = self._check_status("Geocoding", body, accepted=("OK", "ZERO_RESULTS"))
        results = body.get("results") or []
        if status == "ZERO_RESULTS" or not results:
            raise AddressNotFound(address)

        first = results[0]
        return GeocodeResult(
            location=_point(first["geometry"]["location"]),
            formatted_address=first.get("formatted_address", ""),
            place_id=first.get("place_id", ""),
        )

    async def reverse_geocode(self, point: GeoPoint) -> ReverseGeocodeResult:
        body = await self._get(
            "Reverse geocoding",
            "geocode/json",
            {"latlng": point.as_param(), "language": self.language},
        )
        status = self._check_status(
            "Reverse geocoding", body, accepted=("OK", "ZERO_RESULTS")
        )
        results = body.get("results") or []
        if status == "ZERO_RESULTS" or not results:
            raise AddressNotFound(point.as_param())

        first = results[0]
        return ReverseGeocodeResult(
            formatted_address=first.get("formatted_address", ""),
            place_id=first.get("place_id", ""),
            address_components=[
                AddressComponent(
                    long_name=c.get("long_name", ""),
                    short_name=c.get("short_name", ""),
                    types=list(c.get("types", [])),
                )
                for c in first.get("address_components", [])
            ],
        )

    async def distance_matrix(
        self,
        origins: Sequence[str],
        destinations: Sequence[str],
        mode: str = Config.DEFAULT_TRAVEL_MODE,
    ) -> DistanceMatrixResult:
        """
        Distances and durations for every origin/destination pair.
        A pair whose element status is not OK yields None in both matrices.
        """
        body = await self._get(
            "Distance matrix",
            "distancematrix/json",
            {
                "origins": "|".join(origins),
                "destinations": "|".join(destinations),
                "mode": mode,
                "language": self.language,
            },
        )
        self._check_status("Distance matrix", body)

        rows = body.get("rows") or []
        distances, durations = [], []
        for i in range(len(origins)):
            elements = rows[i].get("elements", []) if i < len(rows) else []
            distance_row, duration_row = [], []
            for j in range(len(destinations)):
                element = elements[j] if j < len(elements) else {}
                if element.get("status") == "OK":
                    distance_row.append(_measure(element["distance"]))
                    duration_row.append(_measure(element["duration"]))
                else:
                    distance_row.append(None)
                    duration_row.append(None)
            distances.append(distance_row)
            durations.append(duration_row)

        return DistanceMatrixResult(
            distances=distances,
            durations=durations,
            origin_addresses=list(body.get("origin_addresses", [])),
            destination_addresses=list(body.get("destination_addresses", [])),
        )

    async def directions(
        self,
        origin: str,
        destination: str,
        mode: str = Config.DEFAULT_TRAVEL_MODE,
    ) -> RouteSummary:
        """Summarize the first route the provider returns."""
        body = await self._get(
            "Directions",
            "directions/json",
            {
                "origin": origin,
                "destination": destination,
                "mode": mode,
                "language": self.language,
            },
        )
        status = self._check_status("Directions", body, accepted=("OK", "ZERO_RESULTS"))
        routes = body.get("routes") or []
        if status == "ZERO_RESULTS" or not routes:
            raise NoRouteFound(origin, destination)

        route = routes[0]
        legs = [
            RouteLeg(
                start_address=leg.get("start_address", ""),
                end_address=leg.get("end_address", ""),
                distance=_measure(leg.get("distance", {})),
                duration=_measure(leg.get("duration", {})),
                steps=[
                    RouteStep(
                        instruction=step.get("html_instructions", ""),
                        distance=_measure(step.get("distance", {})),
                        duration=_measure(step.get("duration", {})),
                        travel_mode=step.get("travel_mode", mode.upper()),
                    )
                    for step in leg.get("steps", [])
                ],
            )
            for leg in route.get("legs", [])
        ]
        if not legs:
            raise NoRouteFound(origin, destination)

        return RouteSummary(
            summary=route.get("summary", ""),
            total_distance=legs[0].distance,
            total_duration=legs[0].duration,
            polyline=(route.get("overview_polyline") or {}).get("points"),
            legs=legs,
            warnings=list(route.get("warnings", [])),
        )

    async def elevation(self, points: Sequence[GeoPoint]) -> List[ElevationSample]:
        """Elevation samples index-aligned with the requested points."""
        if not points:
            return []

        body = await self._get(
            "Elevation",
            "elevation/json",
            {"locations": "|".join(p.as_param() for p in points)},
        )
        self._check_status("Elevation", body)

        results = body.get("results") or []
        if len(results) != len(points):
            raise GatewayError(
                "Elevation",
                "INVALID_RESPONSE",
                f"expected {len(points)} samples, got {len(results)}",
            )
        return [
            ElevationSample(
                elevation=item["elevation"],
                location=point,
                resolution=item.get("resolution"),
            )
            for item, point in zip(results, points)
        ]
