"""HTTP Client for shared connection management.

This module provides a managed httpx.AsyncClient for fetching the
video catalog. Relative endpoints resolve against ``base_url``.
"""

import httpx

from vidshelf.core.logging import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """Managed HTTP client with connection reuse.

    Create once, inject into the loader, close at shutdown.

    Example:
        http_client = HTTPClient(base_url="https://example.com/gallery/")
        response = await http_client.get("videos.json")
        await http_client.close()
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        max_connections: int = 20,
        max_keepalive_connections: int = 10,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Base URL for relative request paths
            timeout: Request timeout in seconds
            max_connections: Maximum number of connections
            max_keepalive_connections: Maximum keepalive connections
        """
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections,
            ),
            follow_redirects=True,
        )
        logger.info(
            "HTTP client initialized",
            base_url=base_url,
            timeout=timeout,
            max_connections=max_connections,
        )

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """Send GET request."""
        return await self._client.get(url, **kwargs)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()
        logger.info("HTTP client closed")


__all__ = ["HTTPClient"]
