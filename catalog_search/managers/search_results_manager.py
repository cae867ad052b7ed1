"""Search results manager - connects list triggers to the pagination coordinator."""

import logging
from typing import Callable, List, Optional
from urllib.parse import quote

from catalog_search.domain.models import DetailRoute, Record
from catalog_search.managers.pagination_coordinator import PaginationCoordinator
from catalog_search.managers.scroll_manager import ScrollManager
from catalog_search.services.result_cache import ResultCache

logger = logging.getLogger("CatalogSearch.SearchResultsManager")


class SearchResultsManager:
    """Manages the search entry, the result list and its scroll triggers."""

    def __init__(
        self,
        coordinator: PaginationCoordinator,
        result_cache: ResultCache,
        columns: int = 2,
        end_reached_threshold: float = 0.1,
        on_navigate: Optional[Callable[[DetailRoute], None]] = None,
    ):
        """Initialize SearchResultsManager.

        Args:
            coordinator: Coordinator owning the cursor and page map
            result_cache: Cache the visible keys are resolved against
            columns: Number of grid columns in the result list
            end_reached_threshold: Near-end distance in viewport lengths
            on_navigate: Callback to open the detail view of a record
        """
        self.coordinator = coordinator
        self.result_cache = result_cache
        self.columns = columns
        self.on_navigate = on_navigate
        self.scroll = ScrollManager(threshold=end_reached_threshold)

        self.query: str = ""

    def on_search_changed(self, text: str) -> None:
        self.query = text or ""

    async def on_search_activate(self) -> bool:
        """Handle Enter in the search entry - search immediately."""
        self.scroll.reset()
        return await self.coordinator.submit_search(self.query)

    async def on_refresh(self) -> bool:
        """Handle pull-to-refresh release."""
        self.scroll.reset()
        return await self.coordinator.refresh()

    async def on_scroll(self, offset: float, viewport_length: float, content_length: float) -> bool:
        """Handle a scroll position change, loading more near the end of the list."""
        if not self.scroll.on_scroll(offset, viewport_length, content_length):
            return False
        logger.debug(f"End of list reached at offset {offset}")
        return await self.coordinator.load_more()

    def visible_records(self) -> List[Record]:
        return self.result_cache.resolve(self.coordinator.get_visible_keys())

    def rows(self) -> List[List[Record]]:
        records = self.visible_records()
        return [records[i:i + self.columns] for i in range(0, len(records), self.columns)]

    @property
    def show_placeholder(self) -> bool:
        """Whether to show the skeleton instead of the (still empty) list."""
        return self.coordinator.loading and not self.coordinator.get_visible_keys()

    @property
    def show_footer_loader(self) -> bool:
        return self.coordinator.is_loading_more

    @property
    def status_text(self) -> str:
        cursor = self.coordinator.cursor
        if not cursor.keyword:
            return ""
        count = len(self.coordinator.get_visible_keys())
        return f"Showing {count} results (page {cursor.current_page} of {cursor.total_pages})"

    def open_record(self, key: str) -> Optional[DetailRoute]:
        """Hand the record's title and url-encoded href to navigation."""
        record = self.result_cache.get(key)
        if record is None:
            logger.warning(f"Cannot open uncached record: {key}")
            return None

        route = DetailRoute(name=record.title, url=quote(record.href, safe="-_.!~*'()"))
        if self.on_navigate:
            self.on_navigate(route)
        return route
