"""
MCP boundary: lists the google_search tool and dispatches calls to the orchestrator.
"""

import logging
from typing import Any, Optional

import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from google_search_mcp.search.schemas import ToolResult
from google_search_mcp.search.search_orchestrator import SearchOrchestrator
from google_search_mcp.search.tool import GOOGLE_SEARCH_TOOL, TOOL_NAME

logger = logging.getLogger(__name__)

SERVER_NAME = "google-search"
SERVER_VERSION = "0.1.0"


def _to_call_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


async def dispatch_tool_call(
    orchestrator: SearchOrchestrator,
    name: str,
    arguments: Optional[dict[str, Any]],
) -> types.CallToolResult:
    if name != TOOL_NAME:
        logger.warning("Call for unknown tool %r", name)
        return _to_call_result(ToolResult(text=f"Unknown tool: {name}", is_error=True))
    # requests is blocking; keep the event loop free for other calls.
    # On cancellation the GET is left to finish under its own timeout.
    result = await anyio.to_thread.run_sync(orchestrator.search, arguments, abandon_on_cancel=True)
    return _to_call_result(result)


def create_server(orchestrator: SearchOrchestrator) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [GOOGLE_SEARCH_TOOL]

    # Argument checks live in parse_search_arguments, not in the SDK's schema validation
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await dispatch_tool_call(orchestrator, name, arguments)

    return server


async def run_stdio(server: Server):
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Google Search MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
