"""Catalog endpoint client.

Fetches the catalog document and turns it into display-ready entries:
identifiers are canonicalized and missing thumbnails are derived.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from vidshelf.config.gallery import LoaderConfig, ThumbnailQuality
from vidshelf.core.exceptions import CatalogFetchError, InvalidVideoIdError
from vidshelf.core.logging import get_logger
from vidshelf.infrastructure.http_client import HTTPClient
from vidshelf.models.video import CatalogDocument, VideoEntry
from vidshelf.services.gallery.normalizer import canonical_video_id
from vidshelf.services.gallery.thumbnail import generate_thumbnail_url

logger = get_logger(__name__)


def parse_catalog(payload: Any, quality: ThumbnailQuality) -> list[VideoEntry]:
    """Validate a catalog payload and normalize its entries.

    Args:
        payload: Decoded JSON document
        quality: Thumbnail quality tier for derived thumbnails

    Returns:
        Entries in source order

    Raises:
        ValidationError: If the document does not match the catalog schema
        InvalidVideoIdError: If an entry without thumbnail has no YouTube ID
    """
    document = CatalogDocument.model_validate(payload)
    return [
        video.model_copy(
            update={
                "id": canonical_video_id(video.id),
                "thumbnail": video.thumbnail or generate_thumbnail_url(video.id, quality),
            }
        )
        for video in document.videos
    ]


class CatalogClient:
    """Client for the catalog endpoint.

    One call to fetch() is one attempt; retrying is the caller's concern.
    """

    def __init__(self, http_client: HTTPClient, config: LoaderConfig) -> None:
        self._http_client = http_client
        self._config = config

    @property
    def endpoint(self) -> str:
        return self._config.video_endpoint

    async def fetch(self, attempt: int = 0) -> list[VideoEntry]:
        """Fetch and parse the catalog.

        Args:
            attempt: Zero-based attempt number, for error context

        Returns:
            Normalized entries in source order

        Raises:
            CatalogFetchError: On any transport, status, decode or validation failure
        """
        try:
            response = await self._http_client.get(self.endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CatalogFetchError(
                f"Request failed: {e}", endpoint=self.endpoint, attempt=attempt
            ) from e

        if not response.is_success:
            raise CatalogFetchError(
                f"HTTP error! status: {response.status_code}",
                endpoint=self.endpoint,
                status_code=response.status_code,
                attempt=attempt,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogFetchError(
                "Malformed catalog JSON",
                endpoint=self.endpoint,
                status_code=response.status_code,
                attempt=attempt,
            ) from e

        try:
            videos = parse_catalog(payload, self._config.thumbnail_quality)
        except (ValidationError, InvalidVideoIdError) as e:
            raise CatalogFetchError(
                f"Invalid catalog document: {e}",
                endpoint=self.endpoint,
                status_code=response.status_code,
                attempt=attempt,
            ) from e

        logger.debug("Catalog fetched", endpoint=self.endpoint, count=len(videos))
        return videos


__all__ = ["CatalogClient", "parse_catalog"]
