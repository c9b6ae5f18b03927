#!/usr/bin/env python3
"""
Schema-driven argument normalization for tool calls.
Checks an argument bag against a tool's JSON schema, applying declared
defaults and coercing loosely-typed values.
"""

import math
from copy import deepcopy

from utils.errors import InvalidParameter, MissingParameter

_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


def normalize_arguments(schema, args):
    """Validate args against an object schema and return the normalized dict."""
    return _normalize_object(schema, args, path="")


def _join(path, key):
    return f"{path}.{key}" if path else key


def _normalize(schema, value, path):
    kind = schema.get("type")
    if kind == "object":
        result = _normalize_object(schema, value, path)
    elif kind == "array":
        result = _normalize_array(schema, value, path)
    elif kind == "string":
        result = _normalize_string(value, path)
    elif kind == "number":
        result = _normalize_number(schema, value, path)
    elif kind == "boolean":
        result = _normalize_boolean(value, path)
    else:
        result = value

    if "enum" in schema and result not in schema["enum"]:
        allowed = ", ".join(str(v) for v in schema["enum"])
        raise InvalidParameter(path, f"must be one of: {allowed}")
    return result


def _normalize_object(schema, value, path):
    if not isinstance(value, dict):
        raise InvalidParameter(path or "arguments", "expected an object")

    properties = schema.get("properties", {})
    required = set(schema.get("required", []))
    normalized = {}
    for key, prop in properties.items():
        field = _join(path, key)
        raw = value.get(key)
        if raw is None:
            if key in required:
                raise MissingParameter(field)
            if "default" in prop:
                normalized[key] = deepcopy(prop["default"])
            continue
        normalized[key] = _normalize(prop, raw, field)
        if key in required and normalized[key] == "":
            raise MissingParameter(field)
    return normalized


def _normalize_array(schema, value, path):
    if not isinstance(value, (list, tuple)):
        raise InvalidParameter(path, "expected an array")
    items = schema.get("items", {})
    normalized = []
    for i, item in enumerate(value):
        field = f"{path}[{i}]"
        item = _normalize(items, item, field)
        if items.get("type") == "string" and item == "":
            raise InvalidParameter(field, "must not be blank")
        normalized.append(item)
    return normalized


def _normalize_string(value, path):
    if not isinstance(value, str):
        raise InvalidParameter(path, "expected a string")
    return value.strip()


def _normalize_number(schema, value, path):
    if isinstance(value, bool):
        raise InvalidParameter(path, "expected a number")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str) and "_" not in value:
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidParameter(path, "expected a number") from None
    else:
        raise InvalidParameter(path, "expected a number")

    if not math.isfinite(number):
        raise InvalidParameter(path, "must be a finite number")
    if "minimum" in schema and number < schema["minimum"]:
        raise InvalidParameter(path, f"must be >= {schema['minimum']}")
    if "maximum" in schema and number > schema["maximum"]:
        raise InvalidParameter(path, f"must be <= {schema['maximum']}")
    return number


def _normalize_boolean(value, path):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidParameter(path, "expected a boolean")
