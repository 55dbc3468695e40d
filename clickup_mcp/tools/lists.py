"""
List Tools

Lists inside folders, folderless lists inside spaces, and list CRUD.
"""

from typing import Any, Optional

from pydantic import BaseModel

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .base import BaseResource, ReadTool, WriteTool
from .decorators import mcp_resource, mcp_tool

# updateList argument -> body field ClickUp expects
LIST_UPDATE_RENAMES = {
    "name": "name",
    "content": "content",
    "dueDate": "due_date",
    "dueDateTime": "due_date_time",
    "priority": "priority",
    "assignee": "assignee",
    "status": "status",
    "unsetStatus": "unset_status",
}


class FolderIdParams(BaseModel):
    folderId: str


class CreateListParams(BaseModel):
    folderId: str
    name: str
    content: Optional[str] = None


class SpaceIdParams(BaseModel):
    spaceId: str


class ListIdParams(BaseModel):
    listId: str


class UpdateListParams(BaseModel):
    listId: str
    name: Optional[str] = None
    content: Optional[str] = None
    dueDate: Optional[int] = None
    dueDateTime: Optional[bool] = None
    priority: Optional[int] = None
    assignee: Optional[str] = None
    status: Optional[str] = None
    unsetStatus: Optional[bool] = None


@mcp_tool(
    name="getLists",
    description="Fetch all lists in the specified folder",
    params=FolderIdParams,
)
class GetListsTool(ReadTool):
    async def execute(self, api_key: str, params: FolderIdParams) -> Any:
        return await self.context.client.invoke(
            f"folder/{params.folderId}/list", "GET", api_key
        )


@mcp_tool(
    name="createList",
    description="Create a new list in the specified folder",
    params=CreateListParams,
)
class CreateListTool(WriteTool):
    async def execute(self, api_key: str, params: CreateListParams) -> Any:
        body = params.model_dump(include={"name", "content"}, exclude_none=True)
        return await self.context.client.invoke(
            f"folder/{params.folderId}/list", "POST", api_key, body
        )


@mcp_tool(
    name="getFolderlessList",
    description="Fetch all lists that are not in a folder for the specified space",
    params=SpaceIdParams,
)
class GetFolderlessListTool(ReadTool):
    async def execute(self, api_key: str, params: SpaceIdParams) -> Any:
        return await self.context.client.invoke(
            f"space/{params.spaceId}/list", "GET", api_key
        )


@mcp_tool(
    name="getList",
    description="Fetch metadata for a specific list",
    params=ListIdParams,
)
class GetListTool(ReadTool):
    async def execute(self, api_key: str, params: ListIdParams) -> Any:
        return await self.context.client.invoke(f"list/{params.listId}", "GET", api_key)


@mcp_tool(
    name="updateList",
    description="Update properties of a specific list",
    params=UpdateListParams,
)
class UpdateListTool(WriteTool):
    async def execute(self, api_key: str, params: UpdateListParams) -> Any:
        body = {
            clickup_key: getattr(params, key)
            for key, clickup_key in LIST_UPDATE_RENAMES.items()
            if getattr(params, key) is not None
        }
        return await self.context.client.invoke(
            f"list/{params.listId}", "PUT", api_key, body
        )


@mcp_tool(
    name="deleteList",
    description="Delete a specific list",
    params=ListIdParams,
)
class DeleteListTool(WriteTool):
    async def execute(self, api_key: str, params: ListIdParams) -> Any:
        return await self.context.client.invoke(f"list/{params.listId}", "DELETE", api_key)


@mcp_resource(
    name="clickup_list",
    uri_template="clickup://list/{list_id}",
    description="Fetch metadata for a specific list",
)
class ListResource(BaseResource):
    async def fetch(self, api_key: str, list_id: str) -> Any:
        return await self.context.client.invoke(f"list/{list_id}", "GET", api_key)


@mcp_resource(
    name="clickup_folder_lists",
    uri_template="clickup://folder/{folder_id}/lists",
    description="Fetch all lists in the specified folder",
)
class FolderListsResource(BaseResource):
    async def fetch(self, api_key: str, folder_id: str) -> Any:
        return await self.context.client.invoke(f"folder/{folder_id}/list", "GET", api_key)


@mcp_resource(
    name="clickup_space_lists",
    uri_template="clickup://space/{space_id}/lists",
    description="Fetch all folderless lists in the specified space",
)
class SpaceListsResource(BaseResource):
    async def fetch(self, api_key: str, space_id: str) -> Any:
        return await self.context.client.invoke(f"space/{space_id}/list", "GET", api_key)


def register_list_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register list tools and resources."""
    return registry.register_group(
        "lists",
        context,
        tool_classes=[
            GetListsTool,
            CreateListTool,
            GetFolderlessListTool,
            GetListTool,
            UpdateListTool,
            DeleteListTool,
        ],
        resource_classes=[ListResource, FolderListsResource, SpaceListsResource],
    )
