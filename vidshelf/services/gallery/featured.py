"""Built-in featured videos, always rendered ahead of the catalog."""

from datetime import date

from vidshelf.models.video import Author, VideoEntry

FEATURED_VIDEOS: tuple[VideoEntry, ...] = (
    VideoEntry(
        id="vid.mp4",
        title="Angel!?",
        thumbnail="th1.jpg",
        duration="3:32",
        views=1234567,
        upload_date=date(2024, 10, 12),
        author=Author(name="Featured Angel", avatar="profile.jpg"),
    ),
    VideoEntry(
        id="vid2.mp4",
        title="Do not beat me for this",
        thumbnail="th3.jpeg",
        duration="0:18",
        views=891011,
        upload_date=date(2024, 10, 12),
        author=Author(name="Featured chudail", avatar="profile.jpg"),
    ),
)

__all__ = ["FEATURED_VIDEOS"]
