"""Thumbnail URL derivation for YouTube videos."""

from vidshelf.config.gallery import ThumbnailQuality
from vidshelf.core.exceptions import InvalidVideoIdError
from vidshelf.services.gallery.normalizer import normalize_video_id

THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/{quality}.jpg"


def generate_thumbnail_url(video_id: str, quality: ThumbnailQuality) -> str:
    """Build the img.youtube.com thumbnail URL for a video.

    Args:
        video_id: Raw identifier (ID or YouTube URL)
        quality: Thumbnail quality tier

    Returns:
        Thumbnail URL

    Raises:
        InvalidVideoIdError: If no YouTube ID can be extracted
    """
    normalized = normalize_video_id(video_id)
    if not normalized:
        raise InvalidVideoIdError(video_id)
    return THUMBNAIL_URL_TEMPLATE.format(video_id=normalized, quality=quality)


__all__ = ["THUMBNAIL_URL_TEMPLATE", "generate_thumbnail_url"]
