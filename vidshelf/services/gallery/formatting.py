"""Display formatting for gallery items.

Views and age labels, plus the player page link.
"""

import math
from datetime import UTC, date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import quote

from vidshelf.services.gallery.normalizer import is_youtube_video

# Characters encodeURIComponent leaves untouched, besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

SECONDS_PER_DAY = 60 * 60 * 24


def _one_decimal(value: float) -> str:
    # Half away from zero on the exact binary value, like Number#toFixed(1)
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_views(views: int) -> str:
    """Format a view count with K/M suffixes.

    Example:
        >>> format_views(1500)
        '1.5K views'
    """
    if views >= 1_000_000:
        return f"{_one_decimal(views / 1_000_000)}M views"
    if views >= 1_000:
        return f"{_one_decimal(views / 1_000)}K views"
    return f"{views} views"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def time_ago(upload_date: date, now: datetime | None = None) -> str:
    """Relative age label for an upload date.

    The upload date is taken as midnight UTC; the day difference is the
    ceiling of the absolute time difference.

    Args:
        upload_date: Calendar date of upload
        now: Reference time (default: current UTC time)

    Returns:
        Label such as "10 days ago", "2 months ago" or "1 year ago"
    """
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    uploaded_at = datetime.combine(upload_date, time.min, tzinfo=UTC)
    diff_seconds = abs((now - uploaded_at).total_seconds())
    diff_days = math.ceil(diff_seconds / SECONDS_PER_DAY)

    if diff_days < 30:
        return f"{diff_days} days ago"
    if diff_days < 365:
        return _plural(diff_days // 30, "month")
    return _plural(diff_days // 365, "year")


def encode_uri_component(value: str) -> str:
    """Percent-encode a string the way encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_player_url(player_page: str, video_id: str, title: str) -> str:
    """Build the external player link for a video.

    The identifier is inserted as-is; only the title is encoded.

    Args:
        player_page: Player page URL or path
        video_id: Canonical or raw identifier
        title: Video title

    Returns:
        URL of the form ``{player_page}?v={id}&title={title}&type={youtube|local}``
    """
    video_type = "youtube" if is_youtube_video(video_id) else "local"
    return f"{player_page}?v={video_id}&title={encode_uri_component(title)}&type={video_type}"


__all__ = ["build_player_url", "encode_uri_component", "format_views", "time_ago"]
