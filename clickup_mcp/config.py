"""
ClickUp MCP Server Configuration

Manages server configuration: identity, the fallback ClickUp API key,
the outbound API endpoint, transport binding, and logging.
"""

import os
from dataclasses import dataclass, field


@dataclass
class ClickUpServerConfig:
    """Configuration for ClickUp MCP Server."""

    # Server identity
    server_name: str = "clickup-mcp"
    server_version: str = "1.0.0"

    # Authentication (fallback key, overridable per request)
    clickup_api_key: str = field(
        default_factory=lambda: os.getenv("CLICKUP_API_KEY", "")
    )
    api_key_header: str = "X-ClickUp-API-Key"

    # Outbound ClickUp API
    api_base_url: str = "https://api.clickup.com/api"
    request_timeout: float = 30.0  # seconds

    # Transport
    host: str = "localhost"
    port: int = 8080

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )

    @classmethod
    def from_env(cls) -> "ClickUpServerConfig":
        """Create config from environment variables."""
        return cls(
            server_name=os.getenv("MCP_SERVER_NAME", "clickup-mcp"),
            clickup_api_key=os.getenv("CLICKUP_API_KEY", ""),
            api_key_header=os.getenv("CLICKUP_API_KEY_HEADER", "X-ClickUp-API-Key"),
            api_base_url=os.getenv("CLICKUP_API_BASE_URL", "https://api.clickup.com/api"),
            request_timeout=float(os.getenv("CLICKUP_REQUEST_TIMEOUT", "30")),
            host=os.getenv("MCP_HOST", "localhost"),
            port=int(os.getenv("MCP_PORT", "8080")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not (1024 <= self.port <= 65535):
            raise ValueError(f"Invalid port: {self.port}. Must be between 1024 and 65535")

        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")

        if not self.api_base_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid api_base_url: {self.api_base_url}")

        if not self.api_key_header:
            raise ValueError("api_key_header must not be empty")
