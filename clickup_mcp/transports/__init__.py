"""Network transports for the ClickUp MCP Server."""

from .app import create_app

__all__ = ["create_app"]
