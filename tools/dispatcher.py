#!/usr/bin/env python3
"""
Tool dispatcher for the maps tools server.

Takes a tool name plus a loosely-typed argument bag, normalizes the arguments
against the tool's contract, resolves locations, calls the gateway and wraps
the outcome in an OperationResult. dispatch() never raises.
"""

import asyncio
import logging

from tools.contracts import TOOL_CONTRACTS, ToolName, resolve_tool_name
from tools.validation import normalize_arguments
from utils.errors import InvalidParameter, MapsToolError, MissingParameters, Timeout
from utils.geo_utils import resolve_location
from utils.models import GeoPoint, LocationInput, OperationResult
from utils.performance_tracker import track_call

logger = logging.getLogger("mcp.tools")


def _consume_result(task):
    if not task.cancelled():
        task.exception()


class Dispatcher:
    """Routes tool calls to the geodata gateway and returns uniform envelopes."""

    def __init__(self, gateway, deadline=None):
        self.gateway = gateway
        self.deadline = deadline
        self._handlers = {
            ToolName.SEARCH_NEARBY: self._search_nearby,
            ToolName.GET_PLACE_DETAILS: self._get_place_details,
            ToolName.GEOCODE: self._geocode,
            ToolName.REVERSE_GEOCODE: self._reverse_geocode,
            ToolName.DISTANCE_MATRIX: self._distance_matrix,
            ToolName.DIRECTIONS: self._directions,
            ToolName.ELEVATION: self._elevation,
        }

    async def dispatch(self, tool_name, args) -> OperationResult:
        """Run one tool call and return its envelope."""
        async with track_call(tool_name) as tracker:
            result = await self._dispatch(tool_name, args)
            tracker.record(result)
        return result

    async def _dispatch(self, tool_name, args):
        try:
            tool = resolve_tool_name(tool_name)
            if args is None:
                raise MissingParameters()
            params = normalize_arguments(TOOL_CONTRACTS[tool].parameter_schema, args)
            logger.info(f"{tool.value} called with: {params}")
            return await self._with_deadline(tool.value, self._handlers[tool](params))
        except MapsToolError as e:
            return OperationResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error in {tool_name}")
            return OperationResult.failure(f"Error: {e}")

    async def _with_deadline(self, operation, coro):
        """
        Await coro, giving up after self.deadline seconds.
        On expiry the underlying call keeps running; only the wait is abandoned.
        """
        if self.deadline is None:
            return await coro
        task = asyncio.ensure_future(coro)
        try:
            return await asyncio.wait_for(asyncio.shield(task), self.deadline)
        except asyncio.TimeoutError:
            task.add_done_callback(_consume_result)
            raise Timeout(operation, self.deadline) from None

    async def _search_nearby(self, params):
        center = params["center"]
        location = LocationInput(
            value=center["value"], is_coordinates=center["isCoordinates"]
        )
        point = await resolve_location(self.gateway, location)
        places = await self.gateway.nearby_search(
            point,
            keyword=params.get("keyword") or None,
            radius=params["radius"],
            open_now=params["openNow"],
            min_rating=params.get("minRating"),
        )
        return OperationResult.ok(places, location=point)

    async def _get_place_details(self, params):
        details = await self.gateway.place_details(params["placeId"])
        return OperationResult.ok(details)

    async def _geocode(self, params):
        result = await self.gateway.geocode(params["address"])
        return OperationResult.ok(result)

    async def _reverse_geocode(self, params):
        point = GeoPoint(lat=params["latitude"], lng=params["longitude"])
        result = await self.gateway.reverse_geocode(point)
        return OperationResult.ok(result)

    async def _distance_matrix(self, params):
        for field in ("origins", "destinations"):
            if not params[field]:
                raise InvalidParameter(field, "must contain at least one entry")
        result = await self.gateway.distance_matrix(
            params["origins"], params["destinations"], params["mode"]
        )
        return OperationResult.ok(result)

    async def _directions(self, params):
        route = await self.gateway.directions(
            params["origin"], params["destination"], params["mode"]
        )
        return OperationResult.ok(route)

    async def _elevation(self, params):
        points = [
            GeoPoint(lat=loc["latitude"], lng=loc["longitude"])
            for loc in params["locations"]
        ]
        samples = await self.gateway.elevation(points)
        return OperationResult.ok(samples)
