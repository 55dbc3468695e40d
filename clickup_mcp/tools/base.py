"""
Base Tool Classes

Abstract base classes for all MCP tools and resources.
Provides common functionality and consistent patterns.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import ResourceTemplate, TextContent, Tool
from pydantic import BaseModel, ValidationError

from ..core.tool_context import ToolContext
from .decorators import require_api_key

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API key missing."


def to_json(value: Any) -> str:
    """Compact JSON, byte-for-byte the shape of the remote payload."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


class NoParams(BaseModel):
    """Tools that take no arguments."""


class PlainText(str):
    """Returned by execute() to send text verbatim instead of as JSON."""


def _tool_key_missing(self, *args, **kwargs) -> list[TextContent]:
    return [TextContent(type="text", text=API_KEY_MISSING)]


def _resource_key_missing(self, *args, **kwargs) -> list[ReadResourceContents]:
    return [
        ReadResourceContents(
            content=to_json({"error": API_KEY_MISSING}),
            mime_type=self.mime_type,
        )
    ]


class BaseTool(ABC):
    """
    Base class for all MCP tools.

    Provides:
    - Argument validation against the params model
    - The API key guard
    - Automatic logging
    - Response formatting

    Subclasses must implement:
    - execute(api_key, params): one ClickUp call, returning its result
    """

    params_model: ClassVar[type[BaseModel]] = NoParams

    def __init__(self, context: ToolContext):
        """
        Initialize base tool.

        Args:
            context: Tool context with access to the client and key resolver
        """
        self.context = context

    @property
    def name(self) -> str:
        return getattr(self, "_mcp_name", self.__class__.__name__)

    def definition(self) -> Tool:
        """MCP tool definition advertised by list_tools."""
        return Tool(
            name=self.name,
            description=getattr(self, "_mcp_description", ""),
            inputSchema=getattr(
                self, "_mcp_input_schema", self.params_model.model_json_schema()
            ),
        )

    @abstractmethod
    async def execute(self, api_key: str, params: BaseModel) -> Any:
        """
        Execute the tool.

        This method must be implemented by subclasses.

        Args:
            api_key: Resolved ClickUp API key (never empty)
            params: Validated arguments

        Returns:
            Tool-specific result (will be formatted as JSON unless PlainText)
        """

    async def __call__(self, arguments: dict[str, Any] | None) -> list[TextContent]:
        """
        MCP tool entry point.

        This is called by the MCP server when the tool is invoked.

        Handles:
        - Argument validation
        - Logging
        - Error handling
        - Response formatting

        Args:
            arguments: Tool arguments from MCP request

        Returns:
            List of TextContent responses
        """
        tool_name = self.__class__.__name__
        arguments = arguments or {}

        try:
            logger.info(
                "[%s] Called with arguments: %s",
                tool_name,
                self._sanitize_args_for_log(arguments)
            )

            params = self.params_model.model_validate(arguments)
            response = await self._run(params)

            logger.info("[%s] Completed successfully", tool_name)
            return response

        except ValidationError as e:
            logger.warning("[%s] Invalid arguments: %s", tool_name, e)
            return [TextContent(type="text", text=self._format_error(e))]

        except Exception as e:
            logger.error(
                "[%s] Error: %s",
                tool_name,
                str(e),
                exc_info=True
            )
            return [TextContent(type="text", text=self._format_error(e))]

    @require_api_key(on_missing=_tool_key_missing)
    async def _run(self, api_key: str, params: BaseModel) -> list[TextContent]:
        result = await self.execute(api_key, params)
        return [TextContent(type="text", text=self._format_response(result))]

    def _format_response(self, result: Any) -> str:
        """
        Format result as JSON string.

        Args:
            result: Tool result

        Returns:
            JSON string, or the text itself for PlainText results
        """
        if isinstance(result, PlainText):
            return str(result)
        return to_json(result)

    def _format_error(self, error: Exception) -> str:
        """
        Format error as JSON string.

        Args:
            error: Exception that occurred

        Returns:
            JSON error message
        """
        return to_json({
            "error": str(error),
            "type": type(error).__name__
        })

    def _sanitize_args_for_log(self, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Sanitize arguments for logging (hide sensitive data).

        Args:
            arguments: Tool arguments

        Returns:
            Sanitized arguments
        """
        sanitized = arguments.copy()

        sensitive_fields = ["password", "api_key", "api_token", "token", "secret"]
        for field in sensitive_fields:
            if field in sanitized:
                sanitized[field] = "***REDACTED***"

        return sanitized


class ReadTool(BaseTool):
    """
    Base class for read-only tools.

    Read tools:
    - Don't modify data
    - Are safe to call repeatedly

    Examples: getSpace, getTasks, searchDocs
    """

    pass


class WriteTool(BaseTool):
    """
    Base class for write tools.

    Write tools:
    - Create, update or delete ClickUp entities
    - Send a JSON body (except deletes)

    Examples: createTask, updateSpace, deleteFolder
    """

    pass


_TEMPLATE_VAR = re.compile(r"\{(\w+)\}")


class BaseResource(ABC):
    """
    Base class for URI-templated, read-only resources.

    Subclasses must implement:
    - fetch(api_key, **variables): one ClickUp call for the matched URI
    """

    def __init__(self, context: ToolContext):
        self.context = context
        self._pattern = self._compile(self.uri_template)

    @property
    def name(self) -> str:
        return getattr(self, "_mcp_name", self.__class__.__name__)

    @property
    def uri_template(self) -> str:
        return self._mcp_uri_template

    @property
    def mime_type(self) -> str:
        return getattr(self, "_mcp_mime_type", "application/json")

    @staticmethod
    def _compile(template: str) -> re.Pattern:
        parts = []
        last = 0
        for m in _TEMPLATE_VAR.finditer(template):
            parts.append(re.escape(template[last:m.start()]))
            parts.append(f"(?P<{m.group(1)}>[^/?#]+)")
            last = m.end()
        parts.append(re.escape(template[last:]))
        return re.compile("^" + "".join(parts) + "/?$")

    def match(self, uri: str) -> dict[str, str] | None:
        """Template variables for ``uri``, or None if it doesn't match."""
        m = self._pattern.match(uri)
        return m.groupdict() if m else None

    def definition(self) -> ResourceTemplate:
        """MCP resource template advertised by list_resource_templates."""
        return ResourceTemplate(
            name=self.name,
            uriTemplate=self.uri_template,
            description=getattr(self, "_mcp_description", "") or None,
            mimeType=self.mime_type,
        )

    @abstractmethod
    async def fetch(self, api_key: str, **variables: str) -> Any:
        """Call ClickUp for the matched URI and return the decoded result."""

    async def read(self, uri: str, variables: dict[str, str]) -> list[ReadResourceContents]:
        logger.info("[%s] Reading %s", self.__class__.__name__, uri)
        return await self._run(variables)

    @require_api_key(on_missing=_resource_key_missing)
    async def _run(self, api_key: str, variables: dict[str, str]) -> list[ReadResourceContents]:
        result = await self.fetch(api_key, **variables)
        return [ReadResourceContents(content=to_json(result), mime_type=self.mime_type)]
