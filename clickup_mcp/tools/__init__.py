"""
ClickUp MCP Tools

Tools, resources and prompts, one module per ClickUp entity.
"""

from ..core.tool_context import ToolContext
from ..services.tool_registry import ToolRegistry
from .authorization import register_authorization_tools
from .documents import register_document_tools
from .folders import register_folder_tools
from .lists import register_list_tools
from .prompts import register_prompts
from .spaces import register_space_tools
from .tasks import register_task_tools

__all__ = [
    "register_all_tools",
    "register_authorization_tools",
    "register_document_tools",
    "register_folder_tools",
    "register_list_tools",
    "register_prompts",
    "register_space_tools",
    "register_task_tools",
]


def register_all_tools(registry: ToolRegistry, context: ToolContext) -> int:
    """
    Register every tool group, resource and prompt.

    Returns:
        Total number of tools, resources and prompts registered
    """
    count = 0
    count += register_authorization_tools(registry, context)
    count += register_space_tools(registry, context)
    count += register_folder_tools(registry, context)
    count += register_list_tools(registry, context)
    count += register_task_tools(registry, context)
    count += register_document_tools(registry, context)
    count += register_prompts(registry)
    return count
