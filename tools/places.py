#!/usr/bin/env python3
"""
Places tools for the maps server.
Provides nearby search and place details.
"""

from mcp.server.fastmcp import FastMCP

from tools.contracts import GET_PLACE_DETAILS_TOOL, SEARCH_NEARBY_TOOL
from tools.rendering import call_tool


def register_places_tools(app: FastMCP, dispatcher):
    """Register the places tools with the FastMCP app."""

    @app.tool(name=SEARCH_NEARBY_TOOL.name, description=SEARCH_NEARBY_TOOL.description)
    async def search_nearby(
        center=None, keyword: str = None, radius=None, openNow=None, minRating=None
    ):
        """
        center = {"value": address or 'lat,lng', "isCoordinates": bool}.
        minRating filters the returned page; unrated places are dropped.
        """
        return await call_tool(
            dispatcher,
            SEARCH_NEARBY_TOOL.name,
            center=center,
            keyword=keyword,
            radius=radius,
            openNow=openNow,
            minRating=minRating,
        )

    @app.tool(
        name=GET_PLACE_DETAILS_TOOL.name,
        description=GET_PLACE_DETAILS_TOOL.description,
    )
    async def get_place_details(placeId: str = None):
        return await call_tool(dispatcher, GET_PLACE_DETAILS_TOOL.name, placeId=placeId)
