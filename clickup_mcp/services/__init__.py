"""
Services Layer

Registration services shared by the server and its transports.
"""

from .tool_registry import ToolRegistry

__all__ = ["ToolRegistry"]
