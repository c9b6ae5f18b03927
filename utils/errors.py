#!/usr/bin/env python3
"""
Error taxonomy for the maps tools server.
Every failure a tool call can produce is one of these; the dispatcher turns
them into error envelopes.
"""


class MapsToolError(Exception):
    """Base class for all tool-call failures."""


class MissingParameters(MapsToolError):
    def __init__(self, message="No parameters provided"):
        super().__init__(message)


class MissingParameter(MissingParameters):
    """A required field is absent from the argument bag."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Missing required parameter: {field}")


class InvalidParameter(MapsToolError):
    """A field is present but has the wrong type, value or range."""

    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid parameter '{field}': {reason}")


class UnknownTool(MapsToolError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown tool '{name}'")


class InvalidCoordinateFormat(MapsToolError):
    def __init__(self, message="Invalid coordinate format, expected 'latitude,longitude'"):
        super().__init__(message)


class AddressNotFound(MapsToolError):
    def __init__(self, query=None):
        self.query = query
        if query:
            super().__init__(f"Address not found: {query}")
        else:
            super().__init__("Address not found")


class NoRouteFound(MapsToolError):
    def __init__(self, origin=None, destination=None):
        self.origin = origin
        self.destination = destination
        if origin and destination:
            super().__init__(f"No route found from '{origin}' to '{destination}'")
        else:
            super().__init__("No route found")


class GatewayError(MapsToolError):
    """Upstream provider answered with a non-OK status (or not at all)."""

    def __init__(self, operation, status, detail=None):
        self.operation = operation
        self.status = status
        self.detail = detail
        message = f"{operation} failed: {status}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class Timeout(MapsToolError):
    def __init__(self, operation, seconds):
        self.operation = operation
        self.seconds = seconds
        super().__init__(f"{operation} timed out after {seconds:g}s")
