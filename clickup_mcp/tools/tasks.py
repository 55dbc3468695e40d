"""
Task Tools

Task CRUD, filtered task listing, and getWeekTasks, which walks a list's
task pages and keeps the tasks one assignee closed inside a date range.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..core.tool_context import ToolContext
from ..exceptions import InvalidDateError
from ..services.tool_registry import ToolRegistry
from ..utils.dates import (
    day_bounds_ms,
    epoch_ms_to_sgt,
    epoch_ms_to_sgt_locale,
    parse_day,
    parse_epoch_ms,
)
from .base import BaseResource, PlainText, ReadTool, WriteTool, to_json
from .decorators import mcp_resource, mcp_tool

logger = logging.getLogger(__name__)

TIMESTAMP_GUIDANCE = (
    "supply 13-digit Unix timestamps (ms since epoch) in the user's timezone "
    "(default Asia/Singapore (SGT)). Only include date filters (including "
    "date_done_gt and date_done_lt) when explicitly requested by the user; do "
    "not infer or confuse date_done with date_closed."
)

# Fields getTask annotates with a readable SGT copy (<field>_sgt)
TASK_DATE_FIELDS = (
    "date_created",
    "date_updated",
    "due_date",
    "date_closed",
    "start_date",
)


class GetTasksParams(BaseModel):
    list_id: int
    archived: Optional[bool] = None
    include_markdown_description: Optional[bool] = None
    page: Optional[int] = None
    order_by: Optional[str] = None
    reverse: Optional[bool] = None
    subtasks: Optional[bool] = None
    statuses: Optional[list[str]] = None
    include_closed: Optional[bool] = None
    assignees: Optional[list[str]] = None
    watchers: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    due_date_gt: Optional[int] = None
    due_date_lt: Optional[int] = None
    date_created_gt: Optional[int] = None
    date_created_lt: Optional[int] = None
    date_updated_gt: Optional[int] = None
    date_updated_lt: Optional[int] = None
    date_done_gt: Optional[int] = None
    date_done_lt: Optional[int] = None
    custom_fields: Optional[list[str]] = None
    custom_field: Optional[list[str]] = None
    custom_items: Optional[list[int]] = None


class CreateTaskParams(BaseModel):
    list_id: str
    name: str
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[int] = None
    due_date: Optional[int] = None
    assignees: Optional[list[str]] = None
    tags: Optional[list[str]] = None


class TaskIdParams(BaseModel):
    task_id: str


class UpdateTaskParams(BaseModel):
    task_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[int] = None
    due_date: Optional[int] = None


class GetWeekTasksParams(BaseModel):
    list_id: str
    start_date: str = Field(..., description="Raw date, e.g. 5 May 2025")
    end_date: str = Field(..., description="Raw date, e.g. 11 May 2025")
    assignee_username: str = Field(
        ..., description="Case-insensitive substring of the assignee's username"
    )


@mcp_tool(
    name="getTasks",
    description=(
        "Retrieve tasks/subtasks for a ClickUp list. When using time-based filters "
        "(e.g. due_date_gt, date_created_lt), " + TIMESTAMP_GUIDANCE + " After "
        "execution, include the full JSON result in your response and do not omit "
        "or summarize it."
    ),
    params=GetTasksParams,
)
class GetTasksTool(ReadTool):
    async def execute(self, api_key: str, params: GetTasksParams) -> Any:
        query = params.model_dump(exclude={"list_id"}, exclude_none=True)
        result = await self.context.client.invoke(
            f"list/{params.list_id}/task", "GET", api_key, params=query
        )
        return [] if result is None else result


@mcp_tool(
    name="createTask",
    description="Create a new task in the specified list",
    params=CreateTaskParams,
)
class CreateTaskTool(WriteTool):
    async def execute(self, api_key: str, params: CreateTaskParams) -> Any:
        body = params.model_dump(exclude={"list_id"}, exclude_none=True)
        return await self.context.client.invoke(
            f"list/{params.list_id}/task", "POST", api_key, body
        )


@mcp_tool(
    name="getTask",
    description="Fetch metadata for a specific task",
    params=TaskIdParams,
)
class GetTaskTool(ReadTool):
    async def execute(self, api_key: str, params: TaskIdParams) -> Any:
        result = await self.context.client.invoke(f"task/{params.task_id}", "GET", api_key)
        if not isinstance(result, dict) or "error" in result:
            return result
        return annotate_task_dates(result)


@mcp_tool(
    name="updateTask",
    description="Update properties of a specific task",
    params=UpdateTaskParams,
)
class UpdateTaskTool(WriteTool):
    async def execute(self, api_key: str, params: UpdateTaskParams) -> Any:
        body = params.model_dump(exclude={"task_id"}, exclude_none=True)
        return await self.context.client.invoke(
            f"task/{params.task_id}", "PUT", api_key, body
        )


@mcp_tool(
    name="deleteTask",
    description="Delete a specific task",
    params=TaskIdParams,
)
class DeleteTaskTool(WriteTool):
    async def execute(self, api_key: str, params: TaskIdParams) -> Any:
        return await self.context.client.invoke(f"task/{params.task_id}", "DELETE", api_key)


@mcp_tool(
    name="getWeekTasks",
    description=(
        "Retrieve tasks for a specified ClickUp list that closed within a specific "
        "date range and are assigned to a given user. Parameters list_id must be a "
        "string, start_date and end_date must be raw date eg. 5 May 2025, and "
        "assignee must be a string (case-insensitive substring match). All "
        "parameters are required; the tool returns an error if any are missing."
    ),
    params=GetWeekTasksParams,
)
class GetWeekTasksTool(ReadTool):
    """
    Closed-task report for one assignee over a range of whole SGT days.

    Pages are fetched in order until a page yields no matching task or
    ClickUp reports ``last_page``. A page with zero matches ends the walk
    even if later pages would match. Matches on the page that reports
    ``last_page`` are still collected.
    """

    async def execute(self, api_key: str, params: GetWeekTasksParams) -> Any:
        try:
            start_ms, end_ms = day_bounds_ms(
                parse_day(params.start_date), parse_day(params.end_date)
            )
        except InvalidDateError as e:
            logger.warning("[%s] %s", self.__class__.__name__, e.message)
            return PlainText(f"Error: {e.message}")

        fragment = params.assignee_username.lower()
        path = f"list/{params.list_id}/task"
        collected: list[dict[str, Any]] = []
        page = 0

        while True:
            logger.debug("[%s] Fetching page %d", self.__class__.__name__, page)
            result = await self.context.client.invoke(
                path,
                "GET",
                api_key,
                params={
                    "archived": False,
                    "subtasks": True,
                    "include_closed": True,
                    "page": page,
                },
            )
            if not isinstance(result, dict) or result.get("error") or not isinstance(
                result.get("tasks"), list
            ):
                return PlainText(f"Error fetching tasks: {describe_fetch_error(result)}")

            matches = [
                task for task in result["tasks"]
                if closed_in_range(task, start_ms, end_ms, fragment)
            ]
            collected.extend(matches)
            if not matches or result.get("last_page") is True:
                break
            page += 1

        return [summarize_closed_task(task) for task in collected]


@mcp_resource(
    name="clickup_list_tasks",
    uri_template="clickup://list/{list_id}/tasks",
    description="Fetch tasks/subtasks for a specific list",
)
class ListTasksResource(BaseResource):
    async def fetch(self, api_key: str, list_id: str) -> Any:
        return await self.context.client.invoke(f"list/{list_id}/task", "GET", api_key)


@mcp_resource(
    name="clickup_task",
    uri_template="clickup://task/{task_id}",
    description="Fetch metadata for a specific task",
)
class TaskResource(BaseResource):
    async def fetch(self, api_key: str, task_id: str) -> Any:
        return await self.context.client.invoke(f"task/{task_id}", "GET", api_key)


def annotate_task_dates(task: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``task`` with a ``<field>_sgt`` string beside each set date field."""
    annotated = dict(task)
    for field in TASK_DATE_FIELDS:
        ms = parse_epoch_ms(task.get(field))
        if ms:
            annotated[f"{field}_sgt"] = epoch_ms_to_sgt(ms)
    return annotated


def first_assignee(task: dict[str, Any]) -> Optional[str]:
    assignees = task.get("assignees") or []
    if not assignees or not isinstance(assignees[0], dict):
        return None
    return assignees[0].get("username")


def closed_in_range(task: dict[str, Any], start_ms: int, end_ms: int, fragment: str) -> bool:
    closed = parse_epoch_ms(task.get("date_closed"))
    if closed is None or not start_ms <= closed <= end_ms:
        return False
    return fragment in (first_assignee(task) or "").lower()


def summarize_closed_task(task: dict[str, Any]) -> dict[str, Any]:
    status = task.get("status")
    return {
        "id": task.get("id"),
        "name": task.get("name"),
        "date_closed": epoch_ms_to_sgt_locale(parse_epoch_ms(task.get("date_closed"))),
        "assignee": first_assignee(task),
        "status": status.get("status") if isinstance(status, dict) else None,
        "parent_task_id": task.get("parent"),
    }


def describe_fetch_error(result: Any) -> str:
    error = result.get("error") if isinstance(result, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return to_json(error or result)


def register_task_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """Register task tools and resources."""
    return registry.register_group(
        "tasks",
        context,
        tool_classes=[
            GetTasksTool,
            CreateTaskTool,
            GetTaskTool,
            UpdateTaskTool,
            DeleteTaskTool,
            GetWeekTasksTool,
        ],
        resource_classes=[ListTasksResource, TaskResource],
    )
