"""Video catalog models.

This module defines the displayable video record, the catalog document
served by the catalog endpoint, and the loader lifecycle status.
"""

import enum
from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoaderState(str, enum.Enum):
    """VideoLoader fetch cycle status."""

    IDLE = "idle"  # Constructed, nothing fetched yet
    LOADING = "loading"  # A fetch attempt is in flight
    RETRYING = "retrying"  # Waiting out the backoff delay
    RENDERED = "rendered"  # Dynamic entries are in the container
    FAILED = "failed"  # Retries exhausted, error view shown


class Author(BaseModel):
    """Video author.

    Attributes:
        name: Display name (untrusted, escaped on render)
        avatar: Avatar image URL
    """

    model_config = ConfigDict(frozen=True)

    name: str
    avatar: str = ""


class VideoEntry(BaseModel):
    """Displayable video record.

    ``id`` is a YouTube ID, a YouTube URL or a local filename as received;
    dynamic entries carry the canonical form after catalog parsing.

    Attributes:
        id: Source identifier
        title: Human-readable title (untrusted, escaped on render)
        thumbnail: Thumbnail image URL
        duration: Display duration such as "3:32"
        views: View count
        upload_date: Upload calendar date (UTC for timestamps)
        author: Video author
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    title: str = ""
    thumbnail: str | None = None
    duration: str | None = None
    views: int = Field(default=0, ge=0)
    upload_date: date = Field(alias="uploadDate")
    author: Author

    @field_validator("upload_date", mode="before")
    @classmethod
    def date_from_timestamp(cls, v):
        """Accept full ISO timestamps, keeping the UTC calendar date."""
        if isinstance(v, str) and len(v) > 10:
            try:
                parsed = datetime.fromisoformat(v)
            except ValueError:
                return v
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(UTC)
            return parsed.date()
        if isinstance(v, datetime):
            return (v.astimezone(UTC) if v.tzinfo else v).date()
        return v


class CatalogDocument(BaseModel):
    """Catalog document served by the video endpoint.

    Attributes:
        videos: Video descriptors in display order
    """

    videos: list[VideoEntry]
