"""YouTube identifier normalization.

Turns watch/short/embed URLs into the bare 11-character video ID.
"""

import re

YOUTUBE_ID_LENGTH = 11

# Evaluated in order; the first match wins.
VIDEO_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),  # standard
    re.compile(r"youtu\.be/([^&\n?#]+)"),  # short url
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),  # embed
)


def normalize_video_id(raw: str | None) -> str | None:
    """Extract the YouTube video ID from an identifier.

    Any 11-character string is returned unchanged, including local
    filenames that happen to be 11 characters long.

    Args:
        raw: YouTube ID, YouTube URL or arbitrary identifier

    Returns:
        Video ID, or None if nothing matched

    Example:
        >>> normalize_video_id("https://youtu.be/abc12345678")
        'abc12345678'
    """
    if not raw:
        return None
    if len(raw) == YOUTUBE_ID_LENGTH:
        return raw

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(raw)
        if match and match.group(1):
            return match.group(1)

    return None


def is_youtube_video(video_id: str) -> bool:
    """Check whether an identifier is routed to the YouTube player.

    Length-only check: an 11-character filename without a dot is
    classified as YouTube too.
    """
    return len(video_id) == YOUTUBE_ID_LENGTH and "." not in video_id


def canonical_video_id(raw: str) -> str:
    """Return the YouTube ID when one can be extracted, else the raw identifier."""
    return normalize_video_id(raw) or raw


__all__ = [
    "VIDEO_ID_PATTERNS",
    "YOUTUBE_ID_LENGTH",
    "canonical_video_id",
    "is_youtube_video",
    "normalize_video_id",
]
