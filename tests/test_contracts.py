"""Unit tests for the tool contract registry."""
import pytest

from tools.contracts import TOOL_CONTRACTS, ToolName, get_contract, list_tools
from utils.errors import UnknownTool


def test_registry_lists_seven_tools_in_order():
    assert [c.name for c in list_tools()] == [
        "search_nearby",
        "get_place_details",
        "maps_geocode",
        "maps_reverse_geocode",
        "maps_distance_matrix",
        "maps_directions",
        "maps_elevation",
    ]


def test_contract_names_unique():
    names = [c.name for c in list_tools()]
    assert len(names) == len(set(names))


def test_every_tool_name_has_contract():
    assert set(TOOL_CONTRACTS) == set(ToolName)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        TOOL_CONTRACTS[ToolName.GEOCODE] = None


def test_unknown_tool():
    with pytest.raises(UnknownTool, match="maps_teleport"):
        get_contract("maps_teleport")


@pytest.mark.parametrize(
    "name,required",
    [
        ("search_nearby", ["center"]),
        ("get_place_details", ["placeId"]),
        ("maps_geocode", ["address"]),
        ("maps_reverse_geocode", ["latitude", "longitude"]),
        ("maps_distance_matrix", ["origins", "destinations"]),
        ("maps_directions", ["origin", "destination"]),
        ("maps_elevation", ["locations"]),
    ],
)
def test_required_fields(name, required):
    assert get_contract(name).parameter_schema["required"] == required


def test_search_nearby_schema_details():
    props = get_contract("search_nearby").parameter_schema["properties"]
    assert props["radius"]["default"] == 1000
    assert props["openNow"]["default"] is False
    assert props["minRating"]["minimum"] == 0
    assert props["minRating"]["maximum"] == 5
    assert props["center"]["properties"]["isCoordinates"]["default"] is False
    assert props["center"]["required"] == ["value"]


def test_travel_mode_enum():
    for name in ("maps_distance_matrix", "maps_directions"):
        mode = get_contract(name).parameter_schema["properties"]["mode"]
        assert mode["enum"] == ["driving", "walking", "bicycling", "transit"]
        assert mode["default"] == "driving"
