"""
Prompts

Reusable prompt templates advertised next to the tools.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, TextContent

from ..services.tool_registry import ToolRegistry

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Singapore (SGT)"


class BasePrompt(ABC):
    """
    Base class for prompts.

    Subclasses set ``name``, ``description`` and ``arguments`` and implement
    render(arguments).
    """

    name: str = ""
    description: str = ""
    arguments: tuple[PromptArgument, ...] = ()

    def definition(self) -> Prompt:
        return Prompt(name=self.name, description=self.description, arguments=list(self.arguments))

    @abstractmethod
    def render(self, arguments: dict[str, str]) -> GetPromptResult:
        """Build the prompt messages for the given arguments."""

    def get(self, arguments: Optional[dict[str, str]] = None) -> GetPromptResult:
        logger.info("[%s] Rendering prompt", self.__class__.__name__)
        return self.render(arguments or {})


class GetTasksPrompt(BasePrompt):
    name = "getTasks"
    description = (
        "When calling the getTasks tool, include any time-based filter parameters as "
        "13-digit Unix timestamps (ms since epoch) in the user's timezone (default "
        f"{DEFAULT_TIMEZONE}). Only include date filters (including date_done_gt and "
        "date_done_lt) when explicitly requested by the user; do not infer or confuse "
        "date_done with date_closed. After the tool runs, include the full JSON result "
        "verbatim in your response; do not omit it."
    )
    arguments = (
        PromptArgument(
            name="timezone",
            description=f"User's timezone (default {DEFAULT_TIMEZONE})",
            required=False,
        ),
    )

    def render(self, arguments: dict[str, str]) -> GetPromptResult:
        tz = arguments.get("timezone") or DEFAULT_TIMEZONE
        text = (
            "Convert all date/time filter parameters to 13-digit Unix timestamps "
            f"(ms since epoch) in timezone {tz} when calling getTasks. Only include "
            "date filters (including date_done_gt and date_done_lt) when explicitly "
            "requested by the user; do not infer or confuse date_done with date_closed."
        )
        return GetPromptResult(
            description=self.description,
            messages=[
                PromptMessage(role="user", content=TextContent(type="text", text=text))
            ],
        )


def register_prompts(registry: ToolRegistry) -> int:
    """Register all prompts."""
    prompts = [GetTasksPrompt()]
    for prompt in prompts:
        registry.register_prompt(prompt, "prompts")
    logger.info("[prompts] Registered %d prompts", len(prompts))
    return len(prompts)
