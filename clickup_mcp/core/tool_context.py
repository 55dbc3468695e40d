"""
Tool Context

Shared context for all MCP tools and resources.
Provides access to the ClickUp client and the API key resolver.
"""

import logging

from .api_key import ApiKeyResolver
from .clickup_client import AsyncClickUpClient

logger = logging.getLogger(__name__)


class ToolContext:
    """
    Shared context for all MCP tools.

    Provides access to:
    - ClickUp client (the single outbound call path)
    - API key resolver (header override, then configured key)

    Holds no per-call state; every call resolves its own key.
    """

    def __init__(self, client: AsyncClickUpClient, key_resolver: ApiKeyResolver):
        """
        Initialize tool context.

        Args:
            client: ClickUp API client
            key_resolver: Resolver for the API key of the current call
        """
        self.client = client
        self.key_resolver = key_resolver

        logger.info("[ToolContext] Initialized (ClickUp API: %s)", client.base_url)

    def resolve_api_key(self) -> str:
        """Get the API key for the current call (empty when missing)."""
        return self.key_resolver.resolve()
