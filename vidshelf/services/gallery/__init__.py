"""Video gallery: catalog loading, normalization and rendering."""

from vidshelf.services.gallery.catalog import CatalogClient, parse_catalog
from vidshelf.services.gallery.featured import FEATURED_VIDEOS
from vidshelf.services.gallery.hooks import ClickDispatcher, ClickEvent, InteractionHooks
from vidshelf.services.gallery.loader import VideoLoader
from vidshelf.services.gallery.normalizer import is_youtube_video, normalize_video_id
from vidshelf.services.gallery.renderer import VideoRenderer
from vidshelf.services.gallery.thumbnail import generate_thumbnail_url

__all__ = [
    "CatalogClient",
    "ClickDispatcher",
    "ClickEvent",
    "FEATURED_VIDEOS",
    "InteractionHooks",
    "VideoLoader",
    "VideoRenderer",
    "generate_thumbnail_url",
    "is_youtube_video",
    "normalize_video_id",
    "parse_catalog",
]
