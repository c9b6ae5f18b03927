#!/usr/bin/env python3
"""
Tool contracts for the maps tools server.
The fixed set of tools, each with the JSON schema advertised to clients.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from config import Config
from utils.errors import UnknownTool


class ToolName(str, Enum):
    SEARCH_NEARBY = "search_nearby"
    GET_PLACE_DETAILS = "get_place_details"
    GEOCODE = "maps_geocode"
    REVERSE_GEOCODE = "maps_reverse_geocode"
    DISTANCE_MATRIX = "maps_distance_matrix"
    DIRECTIONS = "maps_directions"
    ELEVATION = "maps_elevation"


@dataclass(frozen=True)
class ToolContract:
    name: str
    description: str
    parameter_schema: Mapping[str, Any]


_MODE_PROPERTY = {
    "type": "string",
    "enum": list(Config.TRAVEL_MODES),
    "description": "Mode of transportation",
    "default": Config.DEFAULT_TRAVEL_MODE,
}

SEARCH_NEARBY_TOOL = ToolContract(
    name=ToolName.SEARCH_NEARBY.value,
    description="Search for nearby places",
    parameter_schema={
        "type": "object",
        "properties": {
            "center": {
                "type": "object",
                "properties": {
                    "value": {
                        "type": "string",
                        "description": "Address, landmark name, or latitude/longitude coordinates (format: lat,lng)",
                    },
                    "isCoordinates": {
                        "type": "boolean",
                        "description": "Whether the value is coordinates",
                        "default": False,
                    },
                },
                "required": ["value"],
                "description": "Search center point",
            },
            "keyword": {
                "type": "string",
                "description": "Search keyword (e.g., restaurant, cafe)",
            },
            "radius": {
                "type": "number",
                "description": "Search radius (meters)",
                "default": Config.DEFAULT_RADIUS,
            },
            "openNow": {
                "type": "boolean",
                "description": "Whether to show only currently open places",
                "default": False,
            },
            "minRating": {
                "type": "number",
                "description": "Minimum rating requirement (0-5)",
                "minimum": 0,
                "maximum": 5,
            },
        },
        "required": ["center"],
    },
)

GET_PLACE_DETAILS_TOOL = ToolContract(
    name=ToolName.GET_PLACE_DETAILS.value,
    description="Get detailed information about a specific place",
    parameter_schema={
        "type": "object",
        "properties": {
            "placeId": {
                "type": "string",
                "description": "Google Maps Place ID",
            },
        },
        "required": ["placeId"],
    },
)

GEOCODE_TOOL = ToolContract(
    name=ToolName.GEOCODE.value,
    description="Convert an address to coordinates",
    parameter_schema={
        "type": "object",
        "properties": {
            "address": {
                "type": "string",
                "description": "Address or landmark name to convert",
            },
        },
        "required": ["address"],
    },
)

REVERSE_GEOCODE_TOOL = ToolContract(
    name=ToolName.REVERSE_GEOCODE.value,
    description="Convert coordinates to an address",
    parameter_schema={
        "type": "object",
        "properties": {
            "latitude": {"type": "number", "description": "Latitude"},
            "longitude": {"type": "number", "description": "Longitude"},
        },
        "required": ["latitude", "longitude"],
    },
)

DISTANCE_MATRIX_TOOL = ToolContract(
    name=ToolName.DISTANCE_MATRIX.value,
    description="Calculate distances and times between multiple origins and destinations",
    parameter_schema={
        "type": "object",
        "properties": {
            "origins": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of origin addresses or coordinates",
            },
            "destinations": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of destination addresses or coordinates",
            },
            "mode": dict(_MODE_PROPERTY),
        },
        "required": ["origins", "destinations"],
    },
)

DIRECTIONS_TOOL = ToolContract(
    name=ToolName.DIRECTIONS.value,
    description="Get directions between two points",
    parameter_schema={
        "type": "object",
        "properties": {
            "origin": {
                "type": "string",
                "description": "Origin address or coordinates",
            },
            "destination": {
                "type": "string",
                "description": "Destination address or coordinates",
            },
            "mode": dict(_MODE_PROPERTY),
        },
        "required": ["origin", "destination"],
    },
)

ELEVATION_TOOL = ToolContract(
    name=ToolName.ELEVATION.value,
    description="Get elevation data for a location",
    parameter_schema={
        "type": "object",
        "properties": {
            "locations": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "latitude": {"type": "number", "description": "Latitude"},
                        "longitude": {"type": "number", "description": "Longitude"},
                    },
                    "required": ["latitude", "longitude"],
                },
                "description": "List of locations to get elevation data for",
            },
        },
        "required": ["locations"],
    },
)


def _build_registry(*contracts):
    registry = {}
    for contract in contracts:
        key = ToolName(contract.name)
        if key in registry:
            raise ValueError(f"Duplicate tool contract: {contract.name}")
        registry[key] = contract
    missing = set(ToolName) - set(registry)
    if missing:
        raise ValueError(f"Tools without a contract: {sorted(m.value for m in missing)}")
    return MappingProxyType(registry)


TOOL_CONTRACTS = _build_registry(
    SEARCH_NEARBY_TOOL,
    GET_PLACE_DETAILS_TOOL,
    GEOCODE_TOOL,
    REVERSE_GEOCODE_TOOL,
    DISTANCE_MATRIX_TOOL,
    DIRECTIONS_TOOL,
    ELEVATION_TOOL,
)


def list_tools():
    """All registered tool contracts, in advertising order."""
    return tuple(TOOL_CONTRACTS.values())


def resolve_tool_name(name) -> ToolName:
    try:
        return ToolName(name)
    except (ValueError, TypeError):
        raise UnknownTool(name) from None


def get_contract(name) -> ToolContract:
    return TOOL_CONTRACTS[resolve_tool_name(name)]
