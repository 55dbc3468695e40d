"""
ClickUp MCP Server

Exposes ClickUp workspaces, spaces, folders, lists, tasks and docs to AI
agents over the Model Context Protocol.
"""

from .config import ClickUpServerConfig
from .server import ClickUpMCPServer

__all__ = ["ClickUpMCPServer", "ClickUpServerConfig"]

__version__ = "1.0.0"
