#!/usr/bin/env python3
"""
Tool registry for the maps tools MCP server.
Centralizes tool registration and management.
"""

import json

from mcp.server.fastmcp import FastMCP

from tools.contracts import list_tools
from tools.dispatcher import Dispatcher
from tools.elevation import register_elevation_tool
from tools.geocoding import register_geocoding_tools
from tools.places import register_places_tools

from .routing import register_routing_tools


def register_all_tools(app: FastMCP, dispatcher: Dispatcher):
    """Register all maps tools with the FastMCP app."""

    register_places_tools(app, dispatcher)  # Nearby search, place details
    register_geocoding_tools(app, dispatcher)  # Address <-> coordinates
    register_routing_tools(app, dispatcher)  # Distance matrix, directions
    register_elevation_tool(app, dispatcher)

    # Advertise the contract schemas rather than ones inferred from signatures
    for contract in list_tools():
        tool = app._tool_manager.get_tool(contract.name)
        if tool is None:
            raise RuntimeError(f"Tool '{contract.name}' was not registered")
        tool.parameters = json.loads(json.dumps(contract.parameter_schema))
