# ClickUp API Async Client
"""
Async client for the ClickUp REST API.

Every tool and resource funnels its remote call through
AsyncClickUpClient.invoke(); nothing else talks to the network.
"""

import json
import logging
from typing import Any, Optional

import httpx

from ..config import ClickUpServerConfig

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v2"
VERSION_PREFIXES = ("v3",)

# Methods that carry a JSON body. Reads and deletes never send one.
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def resolve_endpoint(path: str) -> tuple[str, str]:
    """
    Split a tool path into (api_version, endpoint_path).

    ``/v3/workspaces/1/docs`` routes to v3 with the marker stripped;
    anything else is a v2 path.
    """
    version = DEFAULT_API_VERSION
    endpoint = path
    for prefix in VERSION_PREFIXES:
        marker = f"/{prefix}"
        if path == marker or path.startswith(marker + "/") or path.startswith(marker + "?"):
            version = prefix
            endpoint = path[len(marker):]
            break
    if not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    return version, endpoint


def clean_params(params: Optional[dict[str, Any]]) -> list[tuple[str, Any]]:
    """
    Flatten query parameters into ordered key/value pairs.

    None values are dropped, lists become repeated keys in input order.
    httpx renders booleans as ``true``/``false``.
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value if item is not None)
        else:
            pairs.append((key, value))
    return pairs


class AsyncClickUpClient:
    """
    Async client for the ClickUp API.

    Usage:
        async with AsyncClickUpClient() as client:
            user = await client.invoke("user", "GET", api_key)
    """

    def __init__(
        self,
        base_url: str = "https://api.clickup.com/api",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize async client.

        Args:
            base_url: ClickUp API root, without the version segment
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(
        cls,
        config: ClickUpServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncClickUpClient":
        return cls(
            base_url=config.api_base_url,
            timeout=config.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "AsyncClickUpClient":
        """Enter async context."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating one if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def build_url(self, path: str) -> str:
        """Absolute URL for a tool path, after version routing."""
        version, endpoint = resolve_endpoint(path)
        return f"{self.base_url}/{version}{endpoint}"

    async def invoke(
        self,
        path: str,
        method: str,
        api_key: str,
        body: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Call one ClickUp endpoint.

        Args:
            path: Resource path, optionally prefixed with ``/v3``
            method: HTTP method
            api_key: ClickUp personal token, sent as the Authorization header
            body: JSON body, only sent for POST/PUT/PATCH
            params: Query parameters (None values dropped, lists repeated)

        Returns:
            The decoded JSON response on success, ``{"error": body, "status": code}``
            on a non-2xx response, or ``{"error": message}`` when no response
            was obtained.
        """
        method = method.upper()
        url = self.build_url(path)
        headers = {
            "Authorization": api_key,
            "Content-Type": "application/json",
        }
        content = None
        if body is not None and method in BODY_METHODS:
            content = json.dumps(body)

        logger.debug("ClickUp %s %s", method, url)

        try:
            response = await self._get_client().request(
                method,
                url,
                params=clean_params(params) or None,
                headers=headers,
                content=content,
            )
            if not response.is_success:
                logger.warning(
                    "ClickUp %s %s returned %s", method, url, response.status_code
                )
                return {"error": self._decode(response), "status": response.status_code}
            if not response.content:
                return {}
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("ClickUp %s %s failed: %s", method, url, e)
            return {"error": str(e) or "Unknown error occurred"}

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
