#!/usr/bin/env python3
"""
Geocoding tools for the maps server.
Provides address to coordinates conversion and back.
"""

from mcp.server.fastmcp import FastMCP

from tools.contracts import GEOCODE_TOOL, REVERSE_GEOCODE_TOOL
from tools.rendering import call_tool


def register_geocoding_tools(app: FastMCP, dispatcher):
    """Register the geocoding tools with the FastMCP app."""

    @app.tool(name=GEOCODE_TOOL.name, description=GEOCODE_TOOL.description)
    async def maps_geocode(address: str = None):
        return await call_tool(dispatcher, GEOCODE_TOOL.name, address=address)

    @app.tool(
        name=REVERSE_GEOCODE_TOOL.name, description=REVERSE_GEOCODE_TOOL.description
    )
    async def maps_reverse_geocode(latitude=None, longitude=None):
        return await call_tool(
            dispatcher,
            REVERSE_GEOCODE_TOOL.name,
            latitude=latitude,
            longitude=longitude,
        )
