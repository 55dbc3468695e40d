"""
Unit tests for ClickUpServerConfig
"""

import pytest

from clickup_mcp.config import ClickUpServerConfig


class TestClickUpServerConfig:
    """Tests for configuration loading and validation."""

    def test_defaults(self):
        config = ClickUpServerConfig(clickup_api_key="")
        assert config.server_name == "clickup-mcp"
        assert config.api_key_header == "X-ClickUp-API-Key"
        assert config.api_base_url == "https://api.clickup.com/api"
        assert config.port == 8080
        config.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CLICKUP_API_KEY", "pk_env")
        monkeypatch.setenv("MCP_PORT", "9090")
        monkeypatch.setenv("CLICKUP_API_KEY_HEADER", "X-Token")
        monkeypatch.setenv("CLICKUP_REQUEST_TIMEOUT", "12.5")

        config = ClickUpServerConfig.from_env()

        assert config.clickup_api_key == "pk_env"
        assert config.port == 9090
        assert config.api_key_header == "X-Token"
        assert config.request_timeout == 12.5

    def test_invalid_port(self):
        with pytest.raises(ValueError, match="Invalid port"):
            ClickUpServerConfig(port=80).validate()

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            ClickUpServerConfig(request_timeout=0).validate()

    def test_invalid_base_url(self):
        with pytest.raises(ValueError):
            ClickUpServerConfig(api_base_url="ftp://example.com").validate()

    def test_empty_header(self):
        with pytest.raises(ValueError):
            ClickUpServerConfig(api_key_header="").validate()
