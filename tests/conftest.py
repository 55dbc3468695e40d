"""
Pytest configuration and fixtures for all tests.

This file ensures the project root is in the Python path
so that imports work correctly for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import pytest for fixtures
from unittest.mock import AsyncMock, MagicMock

import pytest

from clickup_mcp.core.tool_context import ToolContext


@pytest.fixture
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture
def mock_context():
    """Create a mock ToolContext with a resolved API key."""
    context = MagicMock(spec=ToolContext)
    context.client = MagicMock()
    context.client.invoke = AsyncMock(return_value={})
    context.resolve_api_key.return_value = "pk_test"
    return context
