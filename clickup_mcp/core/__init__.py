"""
Core Layer

Components shared by every tool, separated from protocol handling
and transport layers.

Components:
- AsyncClickUpClient: The single chokepoint for ClickUp API calls
- ApiKeyResolver: Picks the per-request or configured API key
- ToolContext: Shared context for all tools and resources
"""

from .api_key import ApiKeyResolver
from .clickup_client import AsyncClickUpClient
from .tool_context import ToolContext

__all__ = [
    "AsyncClickUpClient",
    "ApiKeyResolver",
    "ToolContext",
]
