#!/usr/bin/env python3
"""
Configuration module for the Maps Tools MCP server.
Centralizes the API key, provider settings, and environment variables.
"""

import os


def _optional_float(name):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Config:
    """Configuration class for maps tools settings."""

    # API Keys
    GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")

    # Provider Settings
    MAPS_API_BASE = os.getenv("MAPS_API_BASE", "https://maps.googleapis.com/maps/api")
    MAPS_LANGUAGE = os.getenv("MAPS_LANGUAGE", "en")
    MAPS_CALL_DEADLINE = _optional_float("MAPS_CALL_DEADLINE")

    # HTTP Settings
    HTTP_TIMEOUT = 20.0
    HTTP_CONNECT_TIMEOUT = 10.0
    USER_AGENT = "MCPMapsTools/1.0"

    # Server Settings
    SERVER_NAME = "maps-tools"
    SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))
    MCP_TRANSPORT = os.getenv("MCP_TRANSPORT", "stdio")
    TRANSPORTS = ("stdio", "streamable-http")

    # Tool Settings
    DEFAULT_RADIUS = 1000
    DEFAULT_TRAVEL_MODE = "driving"
    TRAVEL_MODES = ("driving", "walking", "bicycling", "transit")

    # File Paths
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    PERFORMANCE_LOG_FILE = os.getenv("PERFORMANCE_LOG_FILE")

    @classmethod
    def has_api_key(cls):
        """Check if the Google Maps API key is configured."""
        return bool(cls.GOOGLE_MAPS_API_KEY)

    @classmethod
    def require_api_key(cls):
        """Return the API key, failing hard when it is not configured."""
        if not cls.has_api_key():
            raise RuntimeError("GOOGLE_MAPS_API_KEY environment variable not set.")
        return cls.GOOGLE_MAPS_API_KEY
