"""Click listeners for rendered gallery elements.

Rendered elements are plain BeautifulSoup tags; listeners are bound to
tag identities and clicks bubble from the target up through its parents.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from bs4 import Tag

from vidshelf.core.logging import get_logger
from vidshelf.models.video import Author, VideoEntry

logger = get_logger(__name__)


@dataclass
class ClickEvent:
    """A click delivered to bound listeners.

    Attributes:
        target: Tag that was clicked
        default_prevented: Set when a listener suppresses the link navigation
    """

    target: Tag
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


ClickListener = Callable[[ClickEvent], None]


@dataclass
class _Binding:
    target: Tag
    listener: ClickListener


@dataclass
class ClickDispatcher:
    """Registry of click listeners keyed by tag identity."""

    _bindings: list[_Binding] = field(default_factory=list)

    def bind(self, target: Tag, listener: ClickListener) -> None:
        self._bindings.append(_Binding(target, listener))

    def unbind_tree(self, root: Tag) -> None:
        """Drop listeners bound to root or any of its descendants."""
        removed = {id(root)} | {id(node) for node in root.descendants}
        self._bindings = [b for b in self._bindings if id(b.target) not in removed]

    def dispatch(self, target: Tag) -> ClickEvent:
        """Deliver a click to target and each of its ancestors, innermost first.

        Args:
            target: Clicked tag

        Returns:
            The event after all listeners ran
        """
        event = ClickEvent(target=target)
        node: Tag | None = target
        while node is not None:
            for binding in list(self._bindings):
                if binding.target is node:
                    binding.listener(event)
            node = node.parent
        return event

    def __len__(self) -> int:
        return len(self._bindings)


def log_video_click(video: VideoEntry) -> None:
    logger.info("Video clicked", title=video.title, video_id=video.id)


def log_author_click(author: Author) -> None:
    logger.info("Author clicked", name=author.name)


@dataclass(frozen=True)
class InteractionHooks:
    """Observer callbacks for gallery clicks.

    Hooks observe only; they never change loader state.
    """

    on_video_click: Callable[[VideoEntry], None] = log_video_click
    on_author_click: Callable[[Author], None] = log_author_click


__all__ = [
    "ClickDispatcher",
    "ClickEvent",
    "ClickListener",
    "InteractionHooks",
    "log_author_click",
    "log_video_click",
]
