"""Dashboard controllers: drive the state machine with a books client."""
import asyncio
from typing import Optional, Union
import logging

from inventory import state as events
from inventory.errors import FetchError
from inventory.models import AvailabilityFilter, DashboardState

logger = logging.getLogger(__name__)


class InventoryDashboard:
    """Synchronous dashboard; every event is handled to completion before the next."""

    def __init__(
        self,
        client,
        availability_filter: Union[str, AvailabilityFilter] = AvailabilityFilter.ALL
    ):
        """
        Args:
            client: Object with fetch_page(page) -> BooksPage (BooksApiClient)
            availability_filter: Initial filter selection
        """
        self.client = client
        self.state: DashboardState = events.initial_state(availability_filter)

    @property
    def loading(self) -> bool:
        return self.state.loading

    def mount(self) -> DashboardState:
        """Load page 1."""
        self.state, page = events.on_mount(self.state)
        if page is not None:
            self.load_page(page)
        return self.state

    def scroll_near_bottom(self) -> DashboardState:
        """Load the next page when the table is scrolled to the end."""
        self.state, page = events.on_scroll_near_bottom(self.state)
        if page is None:
            logger.debug(f"Scroll ignored ({self.state.pagination.phase.value})")
            return self.state
        self.load_page(page)
        return self.state

    def change_filter(self, availability_filter: Union[str, AvailabilityFilter]) -> DashboardState:
        self.state = events.on_filter_change(self.state, availability_filter)
        logger.info(f"Filter: {self.state.availability_filter.value} ({len(self.state.filtered)} rows)")
        return self.state

    def load_page(self, page: int) -> None:
        """Fetch a page the state machine has marked in flight and apply the result."""
        try:
            result = self.client.fetch_page(page)
        except FetchError as e:
            logger.error(f"Error in fetching books (page {page}): {e}")
            result = e
        self.state = events.on_fetch_resolved(self.state, page, result)

    def load_all(self, max_pages: Optional[int] = None) -> DashboardState:
        """
        Mount, then keep scrolling until exhausted, a fetch fails, or
        max_pages pages are loaded.
        """
        if self.state.pagination.current_page == 0 and not self.loading:
            self.mount()

        while events.can_request_next(self.state) and self.state.last_error is None:
            if max_pages is not None and self.state.pagination.current_page >= max_pages:
                break
            self.scroll_near_bottom()

        return self.state


class AsyncInventoryDashboard:
    """
    Dashboard for an asyncio event loop.

    The HTTP request is the only await; scroll events arriving while it is
    pending find the state Loading and are dropped.
    """

    def __init__(
        self,
        client,
        availability_filter: Union[str, AvailabilityFilter] = AvailabilityFilter.ALL
    ):
        """
        Args:
            client: Object with async fetch_page(page) -> BooksPage (AsyncBooksApiClient)
            availability_filter: Initial filter selection
        """
        self.client = client
        self.state: DashboardState = events.initial_state(availability_filter)
        self._task: Optional[asyncio.Task] = None

    @property
    def loading(self) -> bool:
        return self.state.loading

    async def mount(self) -> DashboardState:
        self.state, page = events.on_mount(self.state)
        if page is not None:
            await self._run(page)
        return self.state

    async def scroll_near_bottom(self) -> DashboardState:
        self.state, page = events.on_scroll_near_bottom(self.state)
        if page is not None:
            await self._run(page)
        return self.state

    def change_filter(self, availability_filter: Union[str, AvailabilityFilter]) -> DashboardState:
        self.state = events.on_filter_change(self.state, availability_filter)
        return self.state

    async def _run(self, page: int) -> None:
        self._task = asyncio.ensure_future(self.load_page(page))
        try:
            await self._task
        finally:
            self._task = None

    async def load_page(self, page: int) -> None:
        try:
            result = await self.client.fetch_page(page)
        except FetchError as e:
            logger.error(f"Error in fetching books (page {page}): {e}")
            result = e
        self.state = events.on_fetch_resolved(self.state, page, result)

    async def load_all(self, max_pages: Optional[int] = None) -> DashboardState:
        if self.state.pagination.current_page == 0 and not self.loading:
            await self.mount()

        while events.can_request_next(self.state) and self.state.last_error is None:
            if max_pages is not None and self.state.pagination.current_page >= max_pages:
                break
            await self.scroll_near_bottom()

        return self.state

    async def close(self) -> None:
        """Cancel an in-flight fetch; its result is never applied."""
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                logger.info("In-flight fetch cancelled")
