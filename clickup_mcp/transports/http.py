"""
JSON-over-HTTP Transport for ClickUp MCP Server

Serves /mcp with the MCP SDK's StreamableHTTPSessionManager in stateless,
JSON-response mode: one POST carries one JSON-RPC request and gets one JSON
reply.
"""

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

if TYPE_CHECKING:
    from ..server import ClickUpMCPServer

logger = logging.getLogger(__name__)

HTTP_PATH = "/mcp"


class HttpTransport:
    """Raw ASGI endpoint for /mcp backed by a stateless session manager."""

    def __init__(self, mcp_server: "ClickUpMCPServer"):
        self.session_manager = StreamableHTTPSessionManager(
            app=mcp_server.server,
            json_response=True,
            stateless=True,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(self) -> AsyncIterator[None]:
        """Keep the session manager's task group alive for the app's lifetime."""
        async with self.session_manager.run():
            logger.info("[HTTP] Session manager started")
            try:
                yield
            finally:
                logger.info("[HTTP] Session manager stopped")
