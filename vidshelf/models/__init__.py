"""Data models."""

from vidshelf.models.video import Author, CatalogDocument, LoaderState, VideoEntry

__all__ = ["Author", "CatalogDocument", "LoaderState", "VideoEntry"]
