"""
Tool Registry Service

Holds every registered tool, resource and prompt under a unique name.
Built once at server construction and never mutated afterwards.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..core.tool_context import ToolContext
    from ..tools.base import BaseResource, BaseTool
    from ..tools.prompts import BasePrompt

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Service for managing tool, resource and prompt registration."""

    def __init__(self):
        """Initialize tool registry."""
        self._tools: dict[str, "BaseTool"] = {}
        self._resources: dict[str, "BaseResource"] = {}
        self._prompts: dict[str, "BasePrompt"] = {}
        self._registered_modules: list[str] = []

    def register_tool(self, tool: "BaseTool", module_name: Optional[str] = None) -> None:
        """
        Register a tool instance.

        Args:
            tool: Tool instance to register
            module_name: Optional module name for tracking

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")

        self._tools[tool.name] = tool
        self._track(module_name)

    def register_resource(self, resource: "BaseResource", module_name: Optional[str] = None) -> None:
        if resource.name in self._resources:
            raise ValueError(f"Resource '{resource.name}' already registered")

        self._resources[resource.name] = resource
        self._track(module_name)

    def register_prompt(self, prompt: "BasePrompt", module_name: Optional[str] = None) -> None:
        if prompt.name in self._prompts:
            raise ValueError(f"Prompt '{prompt.name}' already registered")

        self._prompts[prompt.name] = prompt
        self._track(module_name)

    def register_group(
        self,
        module_name: str,
        context: "ToolContext",
        tool_classes: Iterable[type] = (),
        resource_classes: Iterable[type] = (),
    ) -> int:
        """
        Instantiate and register one group of tools and resources.

        Returns:
            Number of tools and resources registered
        """
        count = 0
        for tool_class in tool_classes:
            tool = tool_class(context)
            self.register_tool(tool, module_name)
            logger.debug("[%s] Registered tool: %s", module_name, tool.name)
            count += 1
        for resource_class in resource_classes:
            resource = resource_class(context)
            self.register_resource(resource, module_name)
            logger.debug("[%s] Registered resource: %s", module_name, resource.name)
            count += 1

        logger.info("[%s] Registered %d tools/resources", module_name, count)
        return count

    def _track(self, module_name: Optional[str]) -> None:
        if module_name and module_name not in self._registered_modules:
            self._registered_modules.append(module_name)

    def get_tool(self, tool_name: str) -> Optional["BaseTool"]:
        """
        Get tool by name.

        Args:
            tool_name: Name of the tool

        Returns:
            Tool instance if found, None otherwise
        """
        return self._tools.get(tool_name)

    def get_prompt(self, prompt_name: str) -> Optional["BasePrompt"]:
        return self._prompts.get(prompt_name)

    def find_resource(self, uri: str) -> Optional[tuple["BaseResource", dict[str, str]]]:
        """
        Find the resource whose template matches ``uri``.

        Returns:
            (resource, template variables), or None when nothing matches
        """
        for resource in self._resources.values():
            variables = resource.match(uri)
            if variables is not None:
                return resource, variables
        return None

    def list_tools(self) -> list["BaseTool"]:
        return list(self._tools.values())

    def list_resources(self) -> list["BaseResource"]:
        return list(self._resources.values())

    def list_prompts(self) -> list["BasePrompt"]:
        return list(self._prompts.values())

    def list_tool_names(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools)

    def list_modules(self) -> list[str]:
        return self._registered_modules.copy()

    def get_tool_count(self) -> int:
        """Get total number of registered tools."""
        return len(self._tools)

    def has_tool(self, tool_name: str) -> bool:
        """Check if a tool is registered."""
        return tool_name in self._tools
