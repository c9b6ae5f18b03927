#!/usr/bin/env python3
"""
Elevation tool for the maps server.
"""

from mcp.server.fastmcp import FastMCP

from tools.contracts import ELEVATION_TOOL
from tools.rendering import call_tool


def register_elevation_tool(app: FastMCP, dispatcher):
    """Register the elevation tool with the FastMCP app."""

    @app.tool(name=ELEVATION_TOOL.name, description=ELEVATION_TOOL.description)
    async def maps_elevation(locations=None):
        return await call_tool(dispatcher, ELEVATION_TOOL.name, locations=locations)
