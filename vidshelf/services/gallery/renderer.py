"""Video card rendering.

Cards are built as BeautifulSoup element trees. Untrusted text (titles,
author names) only ever enters the tree as text nodes or attribute
values, so serialization escapes it; there is no raw-markup path.
"""

from dataclasses import dataclass
from datetime import datetime

from bs4 import BeautifulSoup, Tag

from vidshelf.config.gallery import LoaderConfig
from vidshelf.models.video import VideoEntry
from vidshelf.services.gallery.formatting import build_player_url, format_views, time_ago

VIDEO_CLASS = "video"
FEATURED_CLASS = "featured-video"
LOADING_CLASS = "loading"
ERROR_CLASS = "error"

LOADING_TEXT = "Loading videos..."
RETRY_BUTTON_TEXT = "Try Again"


@dataclass
class RenderedVideo:
    """A rendered card and the elements that take click listeners.

    Attributes:
        element: Card root (div.video)
        thumbnail_link: Link to the player page
        author_link: Author name link
    """

    element: Tag
    thumbnail_link: Tag
    author_link: Tag


@dataclass
class ErrorView:
    """Terminal error block with its retry control."""

    element: Tag
    retry_button: Tag


class VideoRenderer:
    """Builds gallery elements inside a document.

    Args:
        document: Document that owns the created tags
        config: Loader configuration (player page)
    """

    def __init__(self, document: BeautifulSoup, config: LoaderConfig) -> None:
        self._document = document
        self._config = config

    def _tag(self, name: str, string: str | None = None, **attrs: str | list[str]) -> Tag:
        if isinstance(attrs.get("class"), str):
            attrs["class"] = attrs["class"].split()
        tag = self._document.new_tag(name, attrs=attrs)
        if string is not None:
            tag.string = string
        return tag

    def render(
        self, video: VideoEntry, featured: bool = False, now: datetime | None = None
    ) -> RenderedVideo:
        """Render one video card.

        Args:
            video: Entry to render
            featured: Tag the card as a featured video
            now: Reference time for the age label

        Returns:
            RenderedVideo with the card and its clickable elements
        """
        classes = [VIDEO_CLASS, FEATURED_CLASS] if featured else [VIDEO_CLASS]
        wrapper = self._tag("div", **{"class": classes})

        player_url = build_player_url(self._config.player_page, video.id, video.title)
        thumbnail_link = self._tag("a", href=player_url)
        thumbnail_link.append(
            self._tag("img", src=video.thumbnail or "", alt=video.title, loading="lazy")
        )
        if video.duration:
            thumbnail_link.append(self._tag("span", video.duration, **{"class": "duration"}))
        thumbnail = self._tag("div", **{"class": "video_thumbnail"})
        thumbnail.append(thumbnail_link)

        avatar = self._tag("div", **{"class": "author"})
        avatar.append(
            self._tag("img", src=video.author.avatar, alt=video.author.name, loading="lazy")
        )

        author_link = self._tag("a", video.author.name, href="#", **{"class": "author-name"})
        summary = f"{format_views(video.views)} • {time_ago(video.upload_date, now)}"
        title = self._tag("div", **{"class": "title"})
        title.append(self._tag("h3", video.title))
        title.append(author_link)
        title.append(self._tag("span", summary))

        details = self._tag("div", **{"class": "video_details"})
        details.append(avatar)
        details.append(title)

        wrapper.append(thumbnail)
        wrapper.append(details)
        return RenderedVideo(
            element=wrapper, thumbnail_link=thumbnail_link, author_link=author_link
        )

    def loading_placeholder(self) -> Tag:
        return self._tag("div", LOADING_TEXT, **{"class": LOADING_CLASS})

    def error_view(self, message: str) -> ErrorView:
        """Render the terminal error block with a retry button."""
        element = self._tag("div", **{"class": ERROR_CLASS})
        element.append(self._tag("p", message))
        button = self._tag("button", RETRY_BUTTON_TEXT, type="button")
        element.append(button)
        return ErrorView(element=element, retry_button=button)


__all__ = [
    "ERROR_CLASS",
    "ErrorView",
    "FEATURED_CLASS",
    "LOADING_CLASS",
    "RenderedVideo",
    "VIDEO_CLASS",
    "VideoRenderer",
]
