"""
SSE (Server-Sent Events) Transport for ClickUp MCP Server

GET /sse opens a session; the client then POSTs its messages to the
endpoint announced in the first event (/sse/message?session_id=...).
Uses the MCP SDK's SseServerTransport for the protocol itself.
"""

import logging
from typing import TYPE_CHECKING

from mcp.server.sse import SseServerTransport
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

if TYPE_CHECKING:
    from ..server import ClickUpMCPServer

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"


class SseMessageEndpoint:
    """Raw ASGI endpoint forwarding client POSTs into their SSE session."""

    def __init__(self, transport: SseServerTransport):
        self.transport = transport

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.transport.handle_post_message(scope, receive, send)


class SseTransport:
    """
    One SseServerTransport shared by every SSE session of the app.

    Each GET /sse runs its own MCP session against the same low-level
    server until the client disconnects.
    """

    def __init__(self, mcp_server: "ClickUpMCPServer", message_path: str = SSE_MESSAGE_PATH):
        self.mcp_server = mcp_server
        self.transport = SseServerTransport(message_path)
        self.message_endpoint = SseMessageEndpoint(self.transport)

    async def handle_sse(self, request: Request) -> Response:
        """Run one MCP session over the event stream of this request."""
        server = self.mcp_server.server
        client = request.client.host if request.client else "unknown"
        logger.info("[SSE] Session opened from %s", client)

        async with self.transport.connect_sse(
            request.scope, request.receive, request._send
        ) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

        logger.info("[SSE] Session closed from %s", client)
        return Response()
