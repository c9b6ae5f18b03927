#!/usr/bin/env python3
"""
MCP Maps Tools Server.

Exposes Google Maps place search, geocoding, routing and elevation lookups
as MCP tools:
- Configuration centralized in config.py
- Gateway, resolver and records in utils/ package
- Tool contracts, dispatcher and registration in tools/ package

ENV:
  GOOGLE_MAPS_API_KEY -> Google Maps web services (required)
  MCP_TRANSPORT       -> 'stdio' (default) or 'streamable-http'
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from rich.console import Console

from config import Config
from tools.dispatcher import Dispatcher
from tools.tool_registry import register_all_tools
from utils.google_maps import GoogleMapsGateway

console = Console(stderr=True)


def setup_logging(daemon_mode=False, log_dir=None):
    """Log to a file under the log dir, and to stderr unless running as a daemon."""
    logs_dir = Path(log_dir or Config.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "mcp_server.log"
    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(detailed_formatter)
    handlers = [file_handler]
    if not daemon_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(detailed_formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=logging.INFO, handlers=handlers, force=True)
    logging.getLogger("mcp.tools").setLevel(logging.INFO)
    return log_file


def create_app(gateway, deadline=None):
    """Build the FastMCP app with every maps tool registered."""
    app = FastMCP(
        Config.SERVER_NAME, host=Config.SERVER_HOST, port=Config.SERVER_PORT
    )
    register_all_tools(app, Dispatcher(gateway, deadline=deadline))
    return app


async def run_server(transport, daemon_mode=False):
    """Run the MCP server on the given transport until it is stopped."""
    api_key = Config.require_api_key()
    gateway = GoogleMapsGateway(api_key)
    app = create_app(gateway, deadline=Config.MAPS_CALL_DEADLINE)

    logging.info(f"MCP Maps Server starting ({transport})")
    logging.info(f"Daemon mode: {daemon_mode}")
    if not daemon_mode:
        console.print(f"[bold]MCP Maps Server[/bold] starting ({transport})")
        if transport == "streamable-http":
            console.print(f"Listening on http://{Config.SERVER_HOST}:{Config.SERVER_PORT}")
        console.print(f"Tools loaded: {len(await app.list_tools())}")
        if Config.MAPS_CALL_DEADLINE:
            console.print(f"Call deadline: {Config.MAPS_CALL_DEADLINE:g}s")

    try:
        if transport == "streamable-http":
            await app.run_streamable_http_async()
        else:
            await app.run_stdio_async()
    finally:
        await gateway.aclose()
        logging.info("Server shut down")


def main(argv=None):
    parser = argparse.ArgumentParser(description="MCP Maps Server")
    parser.add_argument(
        "--daemon", action="store_true", help="Run in daemon mode (no UI)"
    )
    parser.add_argument(
        "--transport",
        choices=Config.TRANSPORTS,
        default=Config.MCP_TRANSPORT,
        help="MCP transport to serve on",
    )
    args = parser.parse_args(argv)
    log_file = setup_logging(args.daemon)

    if not Config.has_api_key():
        logging.error("GOOGLE_MAPS_API_KEY environment variable not set.")
        if not args.daemon:
            console.print("[red]GOOGLE_MAPS_API_KEY environment variable not set.[/red]")
        sys.exit(1)

    if not args.daemon:
        console.print(f"Logs: {log_file}")

    try:
        asyncio.run(run_server(args.transport, args.daemon))
    except KeyboardInterrupt:
        logging.info("Server shutting down...")
        if not args.daemon:
            console.print("\nServer shutting down...")


if __name__ == "__main__":
    main()
