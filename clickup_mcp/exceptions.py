"""
Error types for the ClickUp MCP Server

Remote and transport failures are never raised: the API client turns them
into error envelopes. These exceptions cover local failures only.
"""

from typing import Any, Optional


class ClickUpMCPError(Exception):
    """Base exception for the ClickUp MCP Server"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidDateError(ClickUpMCPError):
    """Raised when a raw date string cannot be parsed"""

    def __init__(self, raw: str):
        super().__init__(f"could not parse date '{raw}'", {"value": raw})
        self.raw = raw


class ResourceNotFoundError(ClickUpMCPError):
    """Raised when a resource URI matches no registered template"""

    def __init__(self, uri: str):
        super().__init__(f"Resource not found: {uri}", {"uri": uri})
        self.uri = uri
