#!/usr/bin/env python3
"""
Rendering of dispatcher envelopes into MCP tool output.
"""

import json

from mcp.server.fastmcp.exceptions import ToolError


def render_result(result):
    """
    Render an OperationResult as tool output text.
    Failures raise ToolError so the transport reports isError=true.
    """
    payload = result.to_dict()
    if not payload["success"]:
        raise ToolError(payload["error"])

    text = json.dumps(payload["data"], indent=2)
    if "location" in payload:
        location = json.dumps(payload["location"], indent=2)
        text = f"location: {location}\n{text}"
    return text


async def call_tool(dispatcher, name, **arguments):
    """Dispatch a tool call from keyword arguments, dropping the ones left unset."""
    args = {k: v for k, v in arguments.items() if v is not None}
    return render_result(await dispatcher.dispatch(name, args))
