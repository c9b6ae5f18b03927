"""Unit tests for schema-driven argument normalization."""
import pytest

from tools.contracts import (
    DISTANCE_MATRIX_TOOL,
    ELEVATION_TOOL,
    REVERSE_GEOCODE_TOOL,
    SEARCH_NEARBY_TOOL,
)
from tools.validation import normalize_arguments
from utils.errors import InvalidParameter, MissingParameter, MissingParameters

NEARBY = SEARCH_NEARBY_TOOL.parameter_schema


def test_defaults_applied():
    params = normalize_arguments(NEARBY, {"center": {"value": "Times Square"}})
    assert params == {
        "center": {"value": "Times Square", "isCoordinates": False},
        "radius": 1000,
        "openNow": False,
    }


def test_optional_without_default_is_omitted():
    params = normalize_arguments(NEARBY, {"center": {"value": "x"}})
    assert "keyword" not in params
    assert "minRating" not in params


def test_missing_required_names_field():
    with pytest.raises(MissingParameter) as exc:
        normalize_arguments(NEARBY, {"keyword": "cafe"})
    assert exc.value.field == "center"
    assert isinstance(exc.value, MissingParameters)


def test_missing_nested_required():
    with pytest.raises(MissingParameter, match="center.value"):
        normalize_arguments(NEARBY, {"center": {"isCoordinates": True}})


def test_blank_required_string_counts_as_missing():
    with pytest.raises(MissingParameter, match="center.value"):
        normalize_arguments(NEARBY, {"center": {"value": "   "}})


def test_min_rating_range():
    with pytest.raises(InvalidParameter, match="minRating"):
        normalize_arguments(NEARBY, {"center": {"value": "x"}, "minRating": 5.5})
    with pytest.raises(InvalidParameter, match="minRating"):
        normalize_arguments(NEARBY, {"center": {"value": "x"}, "minRating": -1})
    params = normalize_arguments(NEARBY, {"center": {"value": "x"}, "minRating": 5})
    assert params["minRating"] == 5


def test_loose_values_are_coerced():
    params = normalize_arguments(
        NEARBY,
        {"center": {"value": "x", "isCoordinates": "true"}, "radius": "500", "openNow": "false"},
    )
    assert params["center"]["isCoordinates"] is True
    assert params["radius"] == 500.0
    assert params["openNow"] is False


def test_bool_is_not_a_number():
    with pytest.raises(InvalidParameter, match="radius"):
        normalize_arguments(NEARBY, {"center": {"value": "x"}, "radius": True})


def test_enum_enforced():
    with pytest.raises(InvalidParameter, match="mode"):
        normalize_arguments(
            DISTANCE_MATRIX_TOOL.parameter_schema,
            {"origins": ["a"], "destinations": ["b"], "mode": "flying"},
        )


def test_mode_default():
    params = normalize_arguments(
        DISTANCE_MATRIX_TOOL.parameter_schema, {"origins": ["a"], "destinations": ["b"]}
    )
    assert params["mode"] == "driving"


def test_array_items_validated_with_index_path():
    with pytest.raises(MissingParameter, match=r"locations\[1\].longitude"):
        normalize_arguments(
            ELEVATION_TOOL.parameter_schema,
            {"locations": [{"latitude": 1, "longitude": 2}, {"latitude": 3}]},
        )


def test_array_type_enforced():
    with pytest.raises(InvalidParameter, match="origins"):
        normalize_arguments(
            DISTANCE_MATRIX_TOOL.parameter_schema, {"origins": "a", "destinations": ["b"]}
        )


def test_non_numeric_string_rejected():
    with pytest.raises(InvalidParameter, match="latitude"):
        normalize_arguments(
            REVERSE_GEOCODE_TOOL.parameter_schema, {"latitude": "north", "longitude": 1}
        )


def test_unknown_keys_dropped():
    params = normalize_arguments(
        REVERSE_GEOCODE_TOOL.parameter_schema,
        {"latitude": 1, "longitude": 2, "zoom": 12},
    )
    assert params == {"latitude": 1, "longitude": 2}


def test_blank_array_item_rejected():
    with pytest.raises(InvalidParameter, match=r"'origins\[1\]': must not be blank"):
        normalize_arguments(
            DISTANCE_MATRIX_TOOL.parameter_schema,
            {"origins": ["A", " "], "destinations": ["B"]},
        )


def test_digit_separators_not_a_number():
    with pytest.raises(InvalidParameter, match="latitude"):
        normalize_arguments(
            REVERSE_GEOCODE_TOOL.parameter_schema, {"latitude": "4_0", "longitude": 1}
        )
