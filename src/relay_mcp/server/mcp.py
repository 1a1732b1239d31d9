"""MCP server wiring: exposes the tool registry over stdio or streamable HTTP."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import anyio
import uvicorn
from hopeit.dataobjects.payload import Payload
from mcp import types
from mcp.server.lowlevel.server import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from relay_mcp.client import RelayClient
from relay_mcp.models import ToolExecutionResult
from relay_mcp.settings import RelaySettings
from relay_mcp.tools import ToolRegistry, build_registry

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Query the Relay Protocol API: supported chains, token prices and currencies, "
    "bridge and swap quotes, request status and history, and transaction indexing. "
    "Token amounts are strings in the token's smallest unit."
)

HTTP_ENDPOINT = "/mcp"


class ToolCallFailed(RuntimeError):
    """Carries a serialized error result so the MCP layer flags the call with isError."""


def create_registry(settings: RelaySettings) -> ToolRegistry:
    client = RelayClient(base_url=settings.base_url, timeout_ms=settings.timeout_ms)
    return build_registry(client)


def create_server(settings: RelaySettings, registry: ToolRegistry) -> Server:
    server: Server = Server(
        name=settings.server_name,
        version=settings.server_version,
        instructions=SERVER_INSTRUCTIONS,
    )

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.list_tools()

    # Arguments are validated by the registry, which reports every field error at once.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await registry.invoke(name, arguments)
        return render_result(result)

    return server


def render_result(result: ToolExecutionResult) -> list[types.TextContent]:
    """Serialize a tool result as MCP text content, raising for error results."""
    content = result.content()
    # Payload wraps scalars in {"value": ...}; bare and empty bodies pass through.
    if isinstance(content, dict | list):
        text = Payload.to_json(content, indent=2)
    else:
        text = json.dumps(content)
    if result.is_error:
        raise ToolCallFailed(text)
    return [types.TextContent(type="text", text=text)]


async def _serve_stdio(server: Server) -> None:
    init_options = server.create_initialization_options(
        notification_options=NotificationOptions(tools_changed=False)
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, init_options)


def create_http_app(settings: RelaySettings, registry: ToolRegistry) -> Starlette:
    server = create_server(settings, registry)
    session_manager = StreamableHTTPSessionManager(server)

    @asynccontextmanager
    async def lifespan(_: Starlette) -> AsyncIterator[None]:
        async with session_manager.run():
            yield

    async def streamable_http_app(scope: Scope, receive: Receive, send: Send) -> None:
        await session_manager.handle_request(scope, receive, send)

    async def info(_: Request) -> JSONResponse:
        return JSONResponse(
            {
                "name": settings.server_name,
                "version": settings.server_version,
                "transport": "streamable-http",
                "endpoints": {"health": "/health", "mcp": HTTP_ENDPOINT},
                "tools": len(registry.names),
            }
        )

    async def health(_: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "server": settings.server_name,
                "version": settings.server_version,
            }
        )

    return Starlette(
        routes=[
            Route("/", endpoint=info, methods=["GET"]),
            Route("/health", endpoint=health, methods=["GET"]),
            Mount(HTTP_ENDPOINT, app=streamable_http_app),
        ],
        lifespan=lifespan,
    )


def run_stdio(settings: RelaySettings) -> None:
    server = create_server(settings, create_registry(settings))
    anyio.run(_serve_stdio, server)


def run_http(settings: RelaySettings) -> None:
    app = create_http_app(settings, create_registry(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
