"""Tests for the MCP boundary: tool listing and call dispatch."""

import threading
import time
from unittest.mock import MagicMock

import anyio
from mcp import types

from google_search_mcp.search.schemas import ToolResult
from google_search_mcp.search.tool import GOOGLE_SEARCH_TOOL
from google_search_mcp.server import SERVER_NAME, create_server, dispatch_tool_call


class TestToolDeclaration:
    def test_schema(self):
        schema = GOOGLE_SEARCH_TOOL.inputSchema
        assert GOOGLE_SEARCH_TOOL.name == "google_search"
        assert schema["required"] == ["query"]
        assert set(schema["properties"]) == {
            "query",
            "num_results",
            "date_restrict",
            "language",
            "country",
            "safe_search",
        }
        assert schema["properties"]["safe_search"]["enum"] == ["off", "medium", "high"]

    def test_documented_default_matches_code(self):
        assert GOOGLE_SEARCH_TOOL.inputSchema["properties"]["num_results"]["default"] == 10


class TestCreateServer:
    def test_lists_single_tool(self, orchestrator):
        server = create_server(orchestrator)
        handler = server.request_handlers[types.ListToolsRequest]

        result = anyio.run(handler, types.ListToolsRequest(method="tools/list"))

        assert [tool.name for tool in result.root.tools] == ["google_search"]
        assert server.name == SERVER_NAME


class TestDispatchToolCall:
    def test_success(self, orchestrator, session, make_response, two_items_body):
        session.get.return_value = make_response(json_body=two_items_body)

        result = anyio.run(dispatch_tool_call, orchestrator, "google_search", {"query": "Italian restaurants Boston"})

        assert isinstance(result, types.CallToolResult)
        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text.startswith("Found 2 results:")

    def test_unknown_tool(self, orchestrator, session):
        result = anyio.run(dispatch_tool_call, orchestrator, "web_fetch", {"query": "q"})

        assert result.isError is True
        assert result.content[0].text == "Unknown tool: web_fetch"
        session.get.assert_not_called()

    def test_missing_arguments(self, orchestrator):
        result = anyio.run(dispatch_tool_call, orchestrator, "google_search", None)

        assert result.isError is True
        assert result.content[0].text == "Error: No arguments provided"

    def test_provider_error_flagged(self, orchestrator, session, make_response):
        session.get.return_value = make_response(status_code=500, reason="Internal Server Error")

        result = anyio.run(dispatch_tool_call, orchestrator, "google_search", {"query": "q"})

        assert result.isError is True
        assert result.content[0].text == "Error: Google Search API error: Internal Server Error"


class TestCancellation:
    def test_cancelled_call_does_not_wait_for_search(self):
        release = threading.Event()
        orchestrator = MagicMock()
        orchestrator.search.side_effect = lambda arguments: release.wait(5) and ToolResult(text="late")

        async def cancelled_call():
            with anyio.move_on_after(0.1) as scope:
                await dispatch_tool_call(orchestrator, "google_search", {"query": "q"})
            return scope.cancelled_caught

        started = time.monotonic()
        try:
            assert anyio.run(cancelled_call) is True
            assert time.monotonic() - started < 2
        finally:
            release.set()
