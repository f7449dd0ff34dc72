"""Tests for the MCP tool server."""

from __future__ import annotations

import json

from backspace_detective.mcp_server import ANALYZE_TOOL, TOOLS, handle_tool_call

REQUEST = {
    "total_keystrokes": 100,
    "backspace_count": 10,
    "delete_count": 0,
    "characters_typed": 90,
    "edit_duration_ms": 60000,
}


def test_single_tool_exposed() -> None:
    assert [tool.name for tool in TOOLS] == [ANALYZE_TOOL]


def test_tool_schema_requires_all_counters() -> None:
    schema = TOOLS[0].inputSchema
    assert set(schema["required"]) == set(REQUEST)
    assert all(prop["type"] == "integer" for prop in schema["properties"].values())


def test_analyze_tool_returns_result() -> None:
    content = handle_tool_call(ANALYZE_TOOL, REQUEST)
    assert len(content) == 1
    response = json.loads(content[0].text)
    assert response["prediction"] == "Human"


def test_analyze_tool_returns_error_envelope() -> None:
    content = handle_tool_call(ANALYZE_TOOL, {"backspace_count": 1})
    response = json.loads(content[0].text)
    assert response["is_error"] is True


def test_missing_arguments_yield_error_envelope() -> None:
    content = handle_tool_call(ANALYZE_TOOL, None)
    assert json.loads(content[0].text)["is_error"] is True


def test_unknown_tool() -> None:
    content = handle_tool_call("get_recent_sessions", {})
    assert content[0].text == "Unknown tool: get_recent_sessions"
