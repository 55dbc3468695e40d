"""
Space Tools

Space listing and CRUD. Create and update take the full feature-flag
object; ClickUp expects it snake-cased, one ``{enabled}`` object per feature.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .base import BaseResource, ReadTool, WriteTool
from .decorators import mcp_resource, mcp_tool

DEFAULT_SPACE_COLOR = "#7B68EE"

# Feature key as accepted by the tools -> key ClickUp expects
FEATURE_RENAMES = {
    "dueDates": "due_dates",
    "timeTracking": "time_tracking",
    "tags": "tags",
    "timeEstimates": "time_estimates",
    "checklists": "checklists",
    "customFields": "custom_fields",
    "remapDependencies": "remap_dependencies",
    "dependencyWarning": "dependency_warning",
    "portfolios": "portfolios",
}


class FeatureToggle(BaseModel):
    enabled: bool


class SpaceFeatures(BaseModel):
    dueDates: FeatureToggle
    timeTracking: FeatureToggle
    tags: FeatureToggle
    timeEstimates: FeatureToggle
    checklists: FeatureToggle
    customFields: FeatureToggle
    remapDependencies: FeatureToggle
    dependencyWarning: FeatureToggle
    portfolios: FeatureToggle


def features_payload(features: SpaceFeatures) -> dict[str, Any]:
    return {
        clickup_key: getattr(features, key).model_dump()
        for key, clickup_key in FEATURE_RENAMES.items()
    }


class GetSpacesParams(BaseModel):
    teamId: int = Field(..., description="Workspace (team) ID")
    archived: Optional[bool] = Field(None, description="Include archived spaces")


class CreateSpaceParams(BaseModel):
    workspaceId: str
    name: str
    multipleAssignees: bool
    features: SpaceFeatures


class SpaceIdParams(BaseModel):
    spaceId: str


class UpdateSpaceParams(BaseModel):
    spaceId: str
    name: str
    color: Optional[str] = None
    isPrivate: bool
    adminCanManage: Optional[bool] = None
    multipleAssignees: Optional[bool] = None
    features: SpaceFeatures


@mcp_tool(
    name="getSpaces",
    description="Fetch all spaces in a workspace",
    params=GetSpacesParams,
)
class GetSpacesTool(ReadTool):
    async def execute(self, api_key: str, params: GetSpacesParams) -> Any:
        return await self.context.client.invoke(
            f"team/{params.teamId}/space",
            "GET",
            api_key,
            params={"archived": params.archived},
        )


@mcp_tool(
    name="createSpace",
    description="Create a new space in the specified workspace with given features",
    params=CreateSpaceParams,
)
class CreateSpaceTool(WriteTool):
    async def execute(self, api_key: str, params: CreateSpaceParams) -> Any:
        payload = {
            "name": params.name,
            "multiple_assignees": params.multipleAssignees,
            "features": features_payload(params.features),
        }
        return await self.context.client.invoke(
            f"team/{params.workspaceId}/space", "POST", api_key, payload
        )


@mcp_tool(
    name="getSpace",
    description="Fetch metadata for a specific space",
    params=SpaceIdParams,
)
class GetSpaceTool(ReadTool):
    async def execute(self, api_key: str, params: SpaceIdParams) -> Any:
        return await self.context.client.invoke(f"space/{params.spaceId}", "GET", api_key)


@mcp_tool(
    name="updateSpace",
    description="Update properties of a specific space",
    params=UpdateSpaceParams,
)
class UpdateSpaceTool(WriteTool):
    async def execute(self, api_key: str, params: UpdateSpaceParams) -> Any:
        payload = {
            "name": params.name,
            "color": params.color or DEFAULT_SPACE_COLOR,
            "private": params.isPrivate,
            "admin_can_manage": params.adminCanManage,
            "multiple_assignees": params.multipleAssignees,
            "features": features_payload(params.features),
        }
        payload = {k: v for k, v in payload.items() if v is not None}
        return await self.context.client.invoke(
            f"space/{params.spaceId}", "PUT", api_key, payload
        )


@mcp_tool(
    name="deleteSpace",
    description="Delete a specific space",
    params=SpaceIdParams,
)
class DeleteSpaceTool(WriteTool):
    async def execute(self, api_key: str, params: SpaceIdParams) -> Any:
        return await self.context.client.invoke(f"space/{params.spaceId}", "DELETE", api_key)


@mcp_resource(
    name="clickup_space",
    uri_template="clickup://space/{space_id}",
    description="Fetch metadata for a specific space",
)
class SpaceResource(BaseResource):
    async def fetch(self, api_key: str, space_id: str) -> Any:
        return await self.context.client.invoke(f"space/{space_id}", "GET", api_key)


def register_space_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register space tools and resources."""
    return registry.register_group(
        "spaces",
        context,
        tool_classes=[
            GetSpacesTool,
            CreateSpaceTool,
            GetSpaceTool,
            UpdateSpaceTool,
            DeleteSpaceTool,
        ],
        resource_classes=[SpaceResource],
    )
