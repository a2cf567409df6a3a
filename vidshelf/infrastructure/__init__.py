"""Infrastructure adapters."""

from vidshelf.infrastructure.http_client import HTTPClient

__all__ = ["HTTPClient"]
