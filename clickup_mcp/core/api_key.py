"""
API Key Resolution

Chooses the ClickUp API key for the current call: a per-request header
override wins over the statically configured key.
"""

import logging
from collections.abc import Mapping
from typing import Callable, Optional

from ..config import ClickUpServerConfig

logger = logging.getLogger(__name__)

HeaderSource = Callable[[], Optional[Mapping[str, str]]]


def no_request_headers() -> Optional[Mapping[str, str]]:
    return None


class ApiKeyResolver:
    """
    Resolves the ClickUp API key for one call.

    Checks (in order):
    1. The configured override header (default X-ClickUp-API-Key) on the
       inbound HTTP request carrying the current MCP message
    2. The fallback key from configuration (CLICKUP_API_KEY)

    An empty string means no key is available.
    """

    def __init__(
        self,
        config: ClickUpServerConfig,
        header_source: HeaderSource = no_request_headers,
    ):
        """
        Initialize resolver.

        Args:
            config: Server configuration holding the fallback key and header name
            header_source: Returns the current request's headers, or None
                outside of an HTTP request
        """
        self.config = config
        self._header_source = header_source

    def header_key(self) -> str:
        """Key supplied on the current request, or an empty string."""
        headers = self._header_source()
        if not headers:
            return ""
        return (headers.get(self.config.api_key_header) or "").strip()

    def resolve(self) -> str:
        header_key = self.header_key()
        if header_key:
            logger.debug("Using API key from %s header", self.config.api_key_header)
            return header_key
        return self.config.clickup_api_key or ""
