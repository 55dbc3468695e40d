"""Folder Tools"""

from typing import Any

from pydantic import BaseModel

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .base import BaseResource, ReadTool, WriteTool
from .decorators import mcp_resource, mcp_tool


class SpaceIdParams(BaseModel):
    spaceId: str


class CreateFolderParams(BaseModel):
    spaceId: str
    name: str


class FolderIdParams(BaseModel):
    folderId: str


class UpdateFolderParams(BaseModel):
    folderId: str
    name: str


@mcp_tool(
    name="getFolders",
    description="Fetch all folders in the specified space",
    params=SpaceIdParams,
)
class GetFoldersTool(ReadTool):
    async def execute(self, api_key: str, params: SpaceIdParams) -> Any:
        return await self.context.client.invoke(
            f"space/{params.spaceId}/folder", "GET", api_key
        )


@mcp_tool(
    name="createFolder",
    description="Create a new folder in the specified space with a given name",
    params=CreateFolderParams,
)
class CreateFolderTool(WriteTool):
    async def execute(self, api_key: str, params: CreateFolderParams) -> Any:
        return await self.context.client.invoke(
            f"space/{params.spaceId}/folder", "POST", api_key, {"name": params.name}
        )


@mcp_tool(
    name="getFolder",
    description="Fetch metadata for a specific folder",
    params=FolderIdParams,
)
class GetFolderTool(ReadTool):
    async def execute(self, api_key: str, params: FolderIdParams) -> Any:
        return await self.context.client.invoke(f"folder/{params.folderId}", "GET", api_key)


@mcp_tool(
    name="updateFolder",
    description="Update the name of a specific folder",
    params=UpdateFolderParams,
)
class UpdateFolderTool(WriteTool):
    async def execute(self, api_key: str, params: UpdateFolderParams) -> Any:
        return await self.context.client.invoke(
            f"folder/{params.folderId}", "PUT", api_key, {"name": params.name}
        )


@mcp_tool(
    name="deleteFolder",
    description="Delete a specific folder",
    params=FolderIdParams,
)
class DeleteFolderTool(WriteTool):
    async def execute(self, api_key: str, params: FolderIdParams) -> Any:
        return await self.context.client.invoke(
            f"folder/{params.folderId}", "DELETE", api_key
        )


@mcp_resource(
    name="clickup_folder",
    uri_template="clickup://folder/{folder_id}",
    description="Fetch metadata for a specific folder",
)
class FolderResource(BaseResource):
    async def fetch(self, api_key: str, folder_id: str) -> Any:
        return await self.context.client.invoke(f"folder/{folder_id}", "GET", api_key)


@mcp_resource(
    name="clickup_space_folders",
    uri_template="clickup://space/{space_id}/folders",
    description="Fetch all folders in the specified space",
)
class SpaceFoldersResource(BaseResource):
    async def fetch(self, api_key: str, space_id: str) -> Any:
        return await self.context.client.invoke(f"space/{space_id}/folder", "GET", api_key)


def register_folder_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register folder tools and resources."""
    return registry.register_group(
        "folders",
        context,
        tool_classes=[
            GetFoldersTool,
            CreateFolderTool,
            GetFolderTool,
            UpdateFolderTool,
            DeleteFolderTool,
        ],
        resource_classes=[FolderResource, SpaceFoldersResource],
    )
