"""
Document Tools

Docs live on the v3 API (``/v3/workspaces/...``) except creation,
which still goes through the v2 team endpoint.
"""

from typing import Any, Optional

from pydantic import BaseModel

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .base import BaseResource, ReadTool, WriteTool
from .decorators import mcp_resource, mcp_tool

DEFAULT_SEARCH_LIMIT = 50
DEFAULT_PAGE_DEPTH = -1
DEFAULT_CONTENT_FORMAT = "text/md"


class SearchDocsParams(BaseModel):
    workspaceId: int
    id: Optional[str] = None
    creator: Optional[int] = None
    deleted: Optional[bool] = None
    archived: Optional[bool] = None
    parent_id: Optional[str] = None
    parent_type: Optional[str] = None
    limit: Optional[int] = None
    next_cursor: Optional[str] = None


class CreateDocParams(BaseModel):
    workspaceId: str
    title: str
    content: Optional[str] = None
    parentDoc: Optional[str] = None


class GetDocParams(BaseModel):
    workspaceId: int
    docId: str


class GetDocPagesParams(BaseModel):
    workspaceId: int
    docId: str
    max_page_depth: Optional[int] = None
    content_format: Optional[str] = None


def page_query(max_page_depth: Optional[int] = None, content_format: Optional[str] = None) -> dict[str, Any]:
    return {
        "max_page_depth": DEFAULT_PAGE_DEPTH if max_page_depth is None else max_page_depth,
        "content_format": DEFAULT_CONTENT_FORMAT if content_format is None else content_format,
    }


@mcp_tool(
    name="searchDocs",
    description="Search documents in a workspace with optional filters",
    params=SearchDocsParams,
)
class SearchDocsTool(ReadTool):
    async def execute(self, api_key: str, params: SearchDocsParams) -> Any:
        # Empty strings are omitted like unset ones
        query = {
            "id": params.id or None,
            "creator": params.creator,
            "deleted": params.deleted if params.deleted is not None else False,
            "archived": params.archived if params.archived is not None else False,
            "parent_id": params.parent_id or None,
            "parent_type": params.parent_type or None,
            "limit": params.limit if params.limit is not None else DEFAULT_SEARCH_LIMIT,
            "next_cursor": params.next_cursor or None,
        }
        return await self.context.client.invoke(
            f"/v3/workspaces/{params.workspaceId}/docs", "GET", api_key, params=query
        )


@mcp_tool(
    name="createDoc",
    description="Create a new document in a workspace",
    params=CreateDocParams,
)
class CreateDocTool(WriteTool):
    async def execute(self, api_key: str, params: CreateDocParams) -> Any:
        body: dict[str, Any] = {"title": params.title}
        if params.content:
            body["content"] = params.content
        if params.parentDoc:
            body["parentDoc"] = params.parentDoc
        return await self.context.client.invoke(
            f"team/{params.workspaceId}/doc", "POST", api_key, body
        )


@mcp_tool(
    name="getDoc",
    description="Fetch metadata for a specific document",
    params=GetDocParams,
)
class GetDocTool(ReadTool):
    async def execute(self, api_key: str, params: GetDocParams) -> Any:
        return await self.context.client.invoke(
            f"/v3/workspaces/{params.workspaceId}/docs/{params.docId}", "GET", api_key
        )


@mcp_tool(
    name="getDocPages",
    description="Fetch pages of a specific document with formatting options",
    params=GetDocPagesParams,
)
class GetDocPagesTool(ReadTool):
    async def execute(self, api_key: str, params: GetDocPagesParams) -> Any:
        return await self.context.client.invoke(
            f"/v3/workspaces/{params.workspaceId}/docs/{params.docId}/pages",
            "GET",
            api_key,
            params=page_query(params.max_page_depth, params.content_format),
        )


@mcp_resource(
    name="clickup_docs",
    uri_template="clickup://workspace/{workspace_id}/docs",
    description="List docs in a workspace",
)
class DocsResource(BaseResource):
    async def fetch(self, api_key: str, workspace_id: str) -> Any:
        return await self.context.client.invoke(
            f"/v3/workspaces/{workspace_id}/docs", "GET", api_key
        )


@mcp_resource(
    name="clickup_doc",
    uri_template="clickup://workspace/{workspace_id}/doc/{doc_id}",
    description="Fetch metadata for a specific document",
)
class DocResource(BaseResource):
    async def fetch(self, api_key: str, workspace_id: str, doc_id: str) -> Any:
        return await self.context.client.invoke(
            f"/v3/workspaces/{workspace_id}/docs/{doc_id}", "GET", api_key
        )


@mcp_resource(
    name="clickup_doc_pages",
    uri_template="clickup://workspace/{workspace_id}/doc/{doc_id}/pages",
    description="Fetch pages of a specific document",
)
class DocPagesResource(BaseResource):
    async def fetch(self, api_key: str, workspace_id: str, doc_id: str) -> Any:
        return await self.context.client.invoke(
            f"/v3/workspaces/{workspace_id}/docs/{doc_id}/pages",
            "GET",
            api_key,
            params=page_query(),
        )


def register_document_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register document tools and resources."""
    return registry.register_group(
        "documents",
        context,
        tool_classes=[SearchDocsTool, CreateDocTool, GetDocTool, GetDocPagesTool],
        resource_classes=[DocsResource, DocResource, DocPagesResource],
    )
