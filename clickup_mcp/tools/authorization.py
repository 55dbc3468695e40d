"""
Authorization Tools

Authorized user and workspace (team) metadata.
"""

from typing import Any

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .base import BaseResource, NoParams, ReadTool
from .decorators import mcp_resource, mcp_tool


@mcp_tool(
    name="getAuthorizedUser",
    description="Fetch metadata for the authorized user",
)
class GetAuthorizedUserTool(ReadTool):
    async def execute(self, api_key: str, params: NoParams) -> Any:
        return await self.context.client.invoke("user", "GET", api_key)


@mcp_tool(
    name="getWorkspaces",
    description="List all workspaces accessible by the authorized user",
)
class GetWorkspacesTool(ReadTool):
    async def execute(self, api_key: str, params: NoParams) -> Any:
        return await self.context.client.invoke("team", "GET", api_key)


@mcp_resource(
    name="clickup_user",
    uri_template="clickup://user",
    description="Fetch metadata for the authorized user",
)
class UserResource(BaseResource):
    async def fetch(self, api_key: str) -> Any:
        return await self.context.client.invoke("user", "GET", api_key)


@mcp_resource(
    name="clickup_workspace",
    uri_template="clickup://workspace/{workspace_id}",
    description="Fetch metadata for a specific workspace",
)
class WorkspaceResource(BaseResource):
    async def fetch(self, api_key: str, workspace_id: str) -> Any:
        return await self.context.client.invoke(f"team/{workspace_id}", "GET", api_key)


def register_authorization_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register authorization tools and resources."""
    return registry.register_group(
        "authorization",
        context,
        tool_classes=[GetAuthorizedUserTool, GetWorkspacesTool],
        resource_classes=[UserResource, WorkspaceResource],
    )
