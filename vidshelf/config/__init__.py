"""Gallery configuration models."""

from vidshelf.config.gallery import LoaderConfig, ThumbnailQuality

__all__ = ["LoaderConfig", "ThumbnailQuality"]
