"""
Tool Decorators

Decorators for MCP tool/resource registration and the API key guard.
"""

import logging
from functools import wraps
from typing import Any, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def mcp_tool(name: str, description: str, params: type[BaseModel] | None = None):
    """
    Decorator for MCP tool registration.

    Adds metadata to tool class for registration with MCP server. The input
    schema is generated from the pydantic params model, which is also what
    validates incoming arguments.

    Usage:
        class GetSpaceParams(BaseModel):
            spaceId: str

        @mcp_tool(
            name="getSpace",
            description="Fetch metadata for a specific space",
            params=GetSpaceParams,
        )
        class GetSpaceTool(ReadTool):
            async def execute(self, api_key: str, params: GetSpaceParams):
                ...

    Args:
        name: Tool name (must be unique)
        description: Tool description for AI agents
        params: Pydantic model describing the arguments (optional)

    Returns:
        Decorated class
    """
    def decorator(cls):
        cls._mcp_name = name
        cls._mcp_description = description
        if params is not None:
            cls.params_model = params
        cls._mcp_input_schema = cls.params_model.model_json_schema()
        return cls
    return decorator


def mcp_resource(
    name: str,
    uri_template: str,
    description: str = "",
    mime_type: str = "application/json",
):
    """
    Decorator for MCP resource registration.

    Usage:
        @mcp_resource(
            name="clickup_space",
            uri_template="clickup://space/{space_id}",
            description="Fetch metadata for a specific space",
        )
        class SpaceResource(BaseResource):
            async def fetch(self, api_key: str, space_id: str):
                ...

    Args:
        name: Resource name (must be unique)
        uri_template: RFC 6570 style template, e.g. ``clickup://task/{task_id}``
        description: Resource description for AI agents
        mime_type: MIME type of the produced content

    Returns:
        Decorated class
    """
    def decorator(cls):
        cls._mcp_name = name
        cls._mcp_uri_template = uri_template
        cls._mcp_description = description
        cls._mcp_mime_type = mime_type
        return cls
    return decorator


def require_api_key(on_missing: Callable[..., Any]) -> Callable:
    """
    Decorator that resolves the ClickUp API key before the wrapped call.

    The key is looked up through ``self.context`` and passed as the first
    argument after ``self``. When no key is available the wrapped function is
    never entered; ``on_missing(self, *args, **kwargs)`` is returned instead.

    Usage:
        @require_api_key(on_missing=lambda self, *args: "API key missing.")
        async def _run(self, api_key: str, params):
            ...

    Args:
        on_missing: Builds the short-circuit result

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            api_key = self.context.resolve_api_key()
            if not api_key:
                logger.warning("[%s] API key missing", self.__class__.__name__)
                return on_missing(self, *args, **kwargs)
            return await func(self, api_key, *args, **kwargs)
        return wrapper
    return decorator
