"""
Transport Router

One FastAPI application serving both MCP transports:

- GET  /sse          SSE session
- POST /sse/message  client messages for an SSE session
- /mcp               JSON request/response (GET, POST, DELETE)

Every other path is a 404; the OpenAPI and docs routes are disabled.
"""

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import Response

from .http import HTTP_PATH, HttpTransport
from .sse import SSE_MESSAGE_PATH, SSE_PATH, SseTransport

if TYPE_CHECKING:
    from ..server import ClickUpMCPServer

logger = logging.getLogger(__name__)


def create_app(mcp_server: "ClickUpMCPServer") -> FastAPI:
    """
    Create FastAPI application serving the MCP transports.

    Args:
        mcp_server: ClickUpMCPServer instance whose low-level server handles
            every session

    Returns:
        Configured FastAPI application
    """
    sse = SseTransport(mcp_server)
    http = HttpTransport(mcp_server)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with http.lifespan():
            yield

    app = FastAPI(
        title="ClickUp MCP Server",
        version=mcp_server.config.server_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )

    @app.get(SSE_PATH, include_in_schema=False)
    async def sse_endpoint(request: Request) -> Response:
        """SSE endpoint for MCP protocol."""
        return await sse.handle_sse(request)

    app.add_route(SSE_MESSAGE_PATH, sse.message_endpoint, methods=["POST"])
    app.add_route(HTTP_PATH, http, methods=["GET", "POST", "DELETE"])

    logger.info(
        "Transport routes ready: %s, %s, %s", SSE_PATH, SSE_MESSAGE_PATH, HTTP_PATH
    )
    return app
