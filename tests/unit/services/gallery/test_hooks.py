"""Unit tests for click dispatch and interaction hooks."""

from unittest.mock import MagicMock, patch

import pytest
from bs4 import BeautifulSoup

from vidshelf.services.gallery.hooks import ClickDispatcher, InteractionHooks


@pytest.fixture
def tree() -> BeautifulSoup:
    """Nested link markup."""
    return BeautifulSoup('<div id="card"><a id="link"><img id="img"/></a></div>', "html.parser")


class TestClickDispatcher:
    """Tests for ClickDispatcher."""

    def test_dispatch_to_bound_target(self, tree):
        """Test listener fires for its own target."""
        dispatcher = ClickDispatcher()
        listener = MagicMock()
        link = tree.find(id="link")
        dispatcher.bind(link, listener)

        event = dispatcher.dispatch(link)

        listener.assert_called_once_with(event)
        assert event.target is link

    def test_click_bubbles_to_ancestors(self, tree):
        """Test clicks on a child reach the parent's listeners, innermost first."""
        dispatcher = ClickDispatcher()
        calls = []
        dispatcher.bind(tree.find(id="card"), lambda e: calls.append("card"))
        dispatcher.bind(tree.find(id="link"), lambda e: calls.append("link"))

        dispatcher.dispatch(tree.find(id="img"))

        assert calls == ["link", "card"]

    def test_unbound_target_is_noop(self, tree):
        """Test clicking an unbound element runs nothing."""
        dispatcher = ClickDispatcher()
        event = dispatcher.dispatch(tree.find(id="img"))
        assert event.default_prevented is False

    def test_prevent_default(self, tree):
        """Test listeners can mark the event."""
        dispatcher = ClickDispatcher()
        dispatcher.bind(tree.find(id="link"), lambda e: e.prevent_default())

        assert dispatcher.dispatch(tree.find(id="link")).default_prevented is True

    def test_unbind_tree(self, tree):
        """Test unbinding removes listeners of the root and its descendants."""
        dispatcher = ClickDispatcher()
        dispatcher.bind(tree.find(id="card"), MagicMock())
        dispatcher.bind(tree.find(id="link"), MagicMock())
        assert len(dispatcher) == 2

        dispatcher.unbind_tree(tree.find(id="card"))

        assert len(dispatcher) == 0


class TestInteractionHooks:
    """Tests for default hooks."""

    def test_default_hooks_log(self, video):
        """Test default hooks log the click."""
        hooks = InteractionHooks()
        with patch("vidshelf.services.gallery.hooks.logger") as mock_logger:
            hooks.on_video_click(video)
            hooks.on_author_click(video.author)

        mock_logger.info.assert_any_call(
            "Video clicked", title="Cats & Dogs", video_id="abc12345678"
        )
        mock_logger.info.assert_any_call("Author clicked", name="Pet Channel")

    def test_custom_hooks(self, video):
        """Test caller-supplied callables are used."""
        on_video = MagicMock()
        hooks = InteractionHooks(on_video_click=on_video)

        hooks.on_video_click(video)

        on_video.assert_called_once_with(video)
