"""MCP server exposing editing-pattern analysis as a tool.

Lets an MCP client (an editor integration or an agent harness) submit
aggregated keystroke counters and receive the analysis JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from backspace_detective.adapter import analyze_editing_pattern

if TYPE_CHECKING:
    from backspace_detective.config import BackspaceDetectiveConfig

ANALYZE_TOOL = "analyze_editing_pattern"

_COUNTER_FIELDS = {
    "total_keystrokes": "All key events in the session",
    "backspace_count": "Backspace key events",
    "delete_count": "Forward-delete key events",
    "characters_typed": "Characters that reached the buffer",
    "edit_duration_ms": "Elapsed session time in milliseconds",
}

TOOLS = [
    Tool(
        name=ANALYZE_TOOL,
        description=(
            "Classify an editing session as AI or Human from its backspace "
            "usage and typing speed"
        ),
        inputSchema={
            "type": "object",
            "properties": {
                name: {"type": "integer", "minimum": 0, "description": description}
                for name, description in _COUNTER_FIELDS.items()
            },
            "required": list(_COUNTER_FIELDS),
        },
    ),
]


async def run_mcp_server(config: BackspaceDetectiveConfig) -> None:
    """Start the MCP server on stdio.

    Args:
        config: Configuration providing the announced server name.
    """
    server = Server(config.mcp.server_name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return handle_tool_call(name, arguments)

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def handle_tool_call(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Dispatch a tool call.

    Args:
        name: The tool name.
        arguments: Tool arguments.

    Returns:
        List of TextContent holding the response JSON.
    """
    if name != ANALYZE_TOOL:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    response = analyze_editing_pattern(json.dumps(arguments or {}))
    return [TextContent(type="text", text=response)]
