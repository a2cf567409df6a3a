"""Video gallery loader.

Renders the featured videos into the container, then fetches the
dynamic catalog with linearly increasing retry delays. After the last
retry fails, a persistent error view with a "Try Again" button is shown.

Failures are reported through structlog; the host application must call
`vidshelf.core.logging.setup_logging()` once at startup to configure it.

Example:
    document = BeautifulSoup(html, "html.parser")
    loader = VideoLoader(
        document,
        "videosContainer",
        config=LoaderConfig(thumbnail_quality="hqdefault", error_retries=3),
    )
    await loader.initialize()
    print(loader.render_html())
"""

import asyncio
from collections.abc import Awaitable, Callable, Coroutine, Iterable
from datetime import datetime
from typing import Any

from bs4 import BeautifulSoup, Tag

from vidshelf.config.gallery import LoaderConfig
from vidshelf.core.config import get_config
from vidshelf.core.exceptions import CatalogFetchError, ContainerNotFoundError
from vidshelf.core.logging import get_logger
from vidshelf.core.state_machine import create_loader_state_machine
from vidshelf.infrastructure.http_client import HTTPClient
from vidshelf.models.video import LoaderState, VideoEntry
from vidshelf.services.gallery.catalog import CatalogClient
from vidshelf.services.gallery.featured import FEATURED_VIDEOS
from vidshelf.services.gallery.hooks import ClickDispatcher, ClickEvent, InteractionHooks
from vidshelf.services.gallery.renderer import RenderedVideo, VideoRenderer

logger = get_logger(__name__)

DEFAULT_CONTAINER_ID = "videosContainer"
RETRY_BASE_DELAY_SECONDS = 1.0
FAILURE_MESSAGE = "Failed to load videos after multiple attempts"


class VideoLoader:
    """Loads and renders the video gallery into one container element.

    Attributes:
        config: Immutable loader configuration
        container: Container tag owned by this loader
        state: Current fetch cycle state
        videos: Dynamic entries from the last successful fetch
    """

    def __init__(
        self,
        document: BeautifulSoup,
        container_id: str = DEFAULT_CONTAINER_ID,
        config: LoaderConfig | None = None,
        http_client: HTTPClient | None = None,
        hooks: InteractionHooks | None = None,
        featured: Iterable[VideoEntry] = FEATURED_VIDEOS,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            document: Host page document
            container_id: id of the element that receives the gallery
            config: Loader options (defaults apply when omitted)
            http_client: HTTP client; one is created from app settings if omitted
            hooks: Click observers
            featured: Featured entries, rendered first in this order
            sleep: Coroutine function awaited between retries
            clock: Returns "now" for age labels (default: current UTC time)

        Raises:
            ContainerNotFoundError: If the document has no such element
        """
        container = document.find(id=container_id)
        if not isinstance(container, Tag):
            raise ContainerNotFoundError(container_id)

        self.config = config or LoaderConfig()
        self.container = container
        self._owns_http_client = http_client is None
        if http_client is None:
            settings = get_config()
            http_client = HTTPClient(base_url=settings.site_base_url, timeout=settings.http_timeout)
        self._http_client = http_client
        self._catalog = CatalogClient(http_client, self.config)
        self._renderer = VideoRenderer(document, self.config)
        self._dispatcher = ClickDispatcher()
        self._hooks = hooks or InteractionHooks()
        self._featured = tuple(featured)
        self._sleep = sleep
        self._clock = clock

        self._state = create_loader_state_machine()
        self._videos: list[VideoEntry] = []
        self._dynamic_elements: list[Tag] = []
        self._loading_element: Tag | None = None
        self._error_element: Tag | None = None
        self._is_loading = False
        self._tasks: set[asyncio.Task] = set()

    # ============================================
    # Public API
    # ============================================

    @property
    def state(self) -> LoaderState:
        return self._state.current

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def videos(self) -> tuple[VideoEntry, ...]:
        return tuple(self._videos)

    def initialize(self) -> asyncio.Task:
        """Render featured videos now and schedule the catalog load.

        Must be called from a running event loop.

        Returns:
            Task running the load sequence
        """
        self.render_featured_videos()
        return self._schedule(self.load_videos())

    def retry(self) -> asyncio.Task:
        """Remove the error view and restart the load sequence from attempt 0."""
        self._remove_error_view()
        return self._schedule(self.load_videos())

    async def load_videos(self, retry_count: int = 0) -> None:
        """Fetch the catalog and render it, retrying on failure.

        A call while a fetch is in flight does nothing.

        Args:
            retry_count: Number of attempts already made in this sequence
        """
        if self._is_loading:
            return
        self._is_loading = True
        self._state.transition(LoaderState.LOADING)

        error: CatalogFetchError | None = None
        videos: list[VideoEntry] = []
        try:
            self._show_loading()
            videos = await self._catalog.fetch(attempt=retry_count)
        except CatalogFetchError as e:
            error = e
        except BaseException:
            self._hide_loading()
            self._state.reset(LoaderState.IDLE)
            raise
        finally:
            self._is_loading = False

        if error is None:
            self._videos = videos
            self._state.transition(LoaderState.RENDERED)
            self.render_dynamic_videos()
            logger.info("Videos loaded", count=len(videos), attempts=retry_count + 1)
            return

        logger.error("Error loading videos", **error.to_dict())

        if retry_count < self.config.error_retries:
            delay = RETRY_BASE_DELAY_SECONDS * (retry_count + 1)
            self._state.transition(LoaderState.RETRYING)
            logger.info(
                "Retrying video load",
                attempt=retry_count + 1,
                max_retries=self.config.error_retries,
                delay_seconds=delay,
            )
            await self._sleep(delay)
            await self.load_videos(retry_count + 1)
        else:
            self._state.transition(LoaderState.FAILED)
            self.handle_error(FAILURE_MESSAGE)

    def click(self, target: Tag) -> ClickEvent:
        """Simulate a user click on an element inside the container."""
        return self._dispatcher.dispatch(target)

    def render_html(self) -> str:
        return str(self.container)

    async def close(self) -> None:
        """Cancel pending load tasks and release the owned HTTP client."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if self._owns_http_client:
            await self._http_client.close()

    # ============================================
    # Rendering
    # ============================================

    def render_featured_videos(self) -> None:
        """Clear the container and render the featured videos."""
        self.container.clear()
        self._dispatcher = ClickDispatcher()
        self._dynamic_elements = []
        self._loading_element = None
        self._error_element = None

        now = self._now()
        for video in self._featured:
            rendered = self._renderer.render(video, featured=True, now=now)
            self.container.append(rendered.element)
            self.attach_event_listeners(rendered, video)

    def render_dynamic_videos(self) -> None:
        """Replace the loading placeholder and any previous dynamic cards."""
        self._hide_loading()
        for element in self._dynamic_elements:
            self._dispatcher.unbind_tree(element)
            element.extract()
        self._dynamic_elements = []

        now = self._now()
        for video in self._videos:
            rendered = self._renderer.render(video, now=now)
            self.container.append(rendered.element)
            self.attach_event_listeners(rendered, video)
            self._dynamic_elements.append(rendered.element)

    def handle_error(self, message: str) -> None:
        """Show the terminal error view."""
        self._hide_loading()
        self._remove_error_view()
        view = self._renderer.error_view(message)
        self._dispatcher.bind(view.retry_button, lambda event: self.retry())
        self.container.append(view.element)
        self._error_element = view.element
        logger.error("Video loading failed", message=message, endpoint=self.config.video_endpoint)

    def attach_event_listeners(self, rendered: RenderedVideo, video: VideoEntry) -> None:
        hooks = self._hooks

        def on_thumbnail_click(event: ClickEvent) -> None:
            hooks.on_video_click(video)

        def on_author_click(event: ClickEvent) -> None:
            event.prevent_default()
            hooks.on_author_click(video.author)

        self._dispatcher.bind(rendered.thumbnail_link, on_thumbnail_click)
        self._dispatcher.bind(rendered.author_link, on_author_click)

    # ============================================
    # Internals
    # ============================================

    def _now(self) -> datetime | None:
        return self._clock() if self._clock else None

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _show_loading(self) -> None:
        if self._loading_element is None:
            self._loading_element = self._renderer.loading_placeholder()
            self.container.append(self._loading_element)

    def _hide_loading(self) -> None:
        if self._loading_element is not None:
            self._loading_element.extract()
            self._loading_element = None

    def _remove_error_view(self) -> None:
        if self._error_element is not None:
            self._dispatcher.unbind_tree(self._error_element)
            self._error_element.extract()
            self._error_element = None


__all__ = ["DEFAULT_CONTAINER_ID", "FAILURE_MESSAGE", "RETRY_BASE_DELAY_SECONDS", "VideoLoader"]
