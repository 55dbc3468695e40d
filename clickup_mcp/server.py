"""
ClickUp MCP Server Implementation

Main server class that registers ClickUp tools, resources and prompts and
handles MCP protocol communication.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import GetPromptResult, Prompt, Resource, ResourceTemplate, TextContent, Tool

from .config import ClickUpServerConfig
from .core.api_key import ApiKeyResolver
from .core.clickup_client import AsyncClickUpClient
from .core.tool_context import ToolContext
from .exceptions import ResourceNotFoundError
from .services.tool_registry import ToolRegistry
from .tools import register_all_tools

logger = logging.getLogger(__name__)


class ClickUpMCPServer:
    """
    ClickUp MCP Server

    Exposes ClickUp workspaces, spaces, folders, lists, tasks and docs as MCP
    tools and resources for AI agents.
    """

    def __init__(
        self,
        config: Optional[ClickUpServerConfig] = None,
        client: Optional[AsyncClickUpClient] = None,
    ):
        """
        Initialize ClickUp MCP Server.

        Args:
            config: Server configuration. If None, loads from environment.
            client: ClickUp API client. If None, one is built from config.
        """
        self.config = config or ClickUpServerConfig.from_env()
        self.config.validate()

        self.server = Server(self.config.server_name, version=self.config.server_version)

        self.client = client or AsyncClickUpClient.from_config(self.config)
        self.key_resolver = ApiKeyResolver(self.config, header_source=self._request_headers)
        self.tool_context = ToolContext(self.client, self.key_resolver)

        self.registry = ToolRegistry()
        count = register_all_tools(self.registry, self.tool_context)
        logger.info(
            "Registered %d tools/resources/prompts across %s",
            count,
            ", ".join(self.registry.list_modules()),
        )

        self._register_handlers()

        logger.info(
            "ClickUp MCP Server initialized: %s v%s",
            self.config.server_name,
            self.config.server_version,
        )

    def _request_headers(self) -> Optional[Mapping[str, str]]:
        """Headers of the HTTP request carrying the current MCP message, if any."""
        try:
            request = self.server.request_context.request
        except LookupError:
            return None
        return getattr(request, "headers", None)

    def _register_handlers(self) -> None:
        """Wire the MCP protocol handlers to the registry."""

        @self.server.list_tools()
        async def list_all_tools() -> list[Tool]:
            return self.list_tool_definitions()

        # A single routing handler; the SDK keeps only one call_tool handler
        @self.server.call_tool()
        async def route_tool_call(tool_name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return await self.call_tool(tool_name, arguments)

        @self.server.list_resources()
        async def list_all_resources() -> list[Resource]:
            return []

        @self.server.list_resource_templates()
        async def list_all_resource_templates() -> list[ResourceTemplate]:
            return [resource.definition() for resource in self.registry.list_resources()]

        @self.server.read_resource()
        async def route_resource_read(uri) -> Iterable[ReadResourceContents]:
            return await self.read_resource(str(uri))

        @self.server.list_prompts()
        async def list_all_prompts() -> list[Prompt]:
            return [prompt.definition() for prompt in self.registry.list_prompts()]

        @self.server.get_prompt()
        async def route_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
            return self.get_prompt(name, arguments)

    def list_tool_definitions(self) -> list[Tool]:
        return [tool.definition() for tool in self.registry.list_tools()]

    async def call_tool(self, tool_name: str, arguments: Optional[dict[str, Any]] = None) -> list[TextContent]:
        """
        Route one tool call.

        Args:
            tool_name: Registered tool name
            arguments: Raw tool arguments

        Returns:
            List of TextContent responses
        """
        logger.info("[ROUTER] Routing tool call: %s", tool_name)

        tool = self.registry.get_tool(tool_name)
        if tool is None:
            logger.error("[ROUTER] Tool '%s' not found", tool_name)
            return [TextContent(type="text", text=f"Error: Tool '{tool_name}' not found")]

        return await tool(arguments)

    async def read_resource(self, uri: str) -> list[ReadResourceContents]:
        """
        Read the resource whose URI template matches ``uri``.

        Raises:
            ResourceNotFoundError: If no template matches
        """
        found = self.registry.find_resource(uri)
        if found is None:
            logger.error("[ROUTER] No resource matches %s", uri)
            raise ResourceNotFoundError(uri)

        resource, variables = found
        return await resource.read(uri, variables)

    def get_prompt(self, name: str, arguments: Optional[dict[str, str]] = None) -> GetPromptResult:
        prompt = self.registry.get_prompt(name)
        if prompt is None:
            logger.error("[ROUTER] Prompt '%s' not found", name)
            raise ValueError(f"Unknown prompt: {name}")
        return prompt.get(arguments)

    async def run(self) -> None:
        """
        Serve the SSE and JSON-over-HTTP transports with uvicorn.
        """
        import uvicorn

        from .transports import create_app

        app = create_app(self)

        logger.info(
            "ClickUp MCP Server starting on http://%s:%s", self.config.host, self.config.port
        )
        logger.info("SSE endpoint: http://%s:%s/sse", self.config.host, self.config.port)
        logger.info("HTTP endpoint: http://%s:%s/mcp", self.config.host, self.config.port)

        config_uvicorn = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
            access_log=True,
        )
        server = uvicorn.Server(config_uvicorn)
        try:
            await server.serve()
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        """Clean up resources."""
        await self.client.aclose()
        logger.info("ClickUp MCP Server stopped")
