#!/usr/bin/env python3
"""
Routing tools for the maps server.
Provides distance matrices and turn-by-turn directions.
"""

from mcp.server.fastmcp import FastMCP

from tools.contracts import DIRECTIONS_TOOL, DISTANCE_MATRIX_TOOL
from tools.rendering import call_tool


def register_routing_tools(app: FastMCP, dispatcher):
    """Register the routing tools with the FastMCP app."""

    @app.tool(
        name=DISTANCE_MATRIX_TOOL.name, description=DISTANCE_MATRIX_TOOL.description
    )
    async def maps_distance_matrix(origins=None, destinations=None, mode: str = None):
        """
        origins/destinations = addresses or 'lat,lng' strings.
        mode options: 'driving', 'walking', 'bicycling', 'transit'
        """
        return await call_tool(
            dispatcher,
            DISTANCE_MATRIX_TOOL.name,
            origins=origins,
            destinations=destinations,
            mode=mode,
        )

    @app.tool(name=DIRECTIONS_TOOL.name, description=DIRECTIONS_TOOL.description)
    async def maps_directions(
        origin: str = None, destination: str = None, mode: str = None
    ):
        return await call_tool(
            dispatcher,
            DIRECTIONS_TOOL.name,
            origin=origin,
            destination=destination,
            mode=mode,
        )
