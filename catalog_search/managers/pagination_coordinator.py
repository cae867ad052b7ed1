"""Pagination coordinator - merges fetched result pages into one ordered feed."""

import logging
from typing import Callable, List, Optional

from catalog_search.domain.models import SearchCursor, SearchPage
from catalog_search.domain.page_map import PageMap
from catalog_search.interfaces.ports import RecordStorePort, SearchServicePort
from catalog_search.managers.pagination_manager import PaginationManager
from catalog_search.services.search_client import SearchServiceError

logger = logging.getLogger("CatalogSearch.PaginationCoordinator")


class PaginationCoordinator:
    """Owns the search cursor and the page map for one result list.

    Every fetched record is written to the record store before the page map
    changes, so each visible key already resolves when observers are
    notified. Failed fetches and replies without a result list leave the
    cursor and the page map untouched.
    """

    def __init__(
        self,
        search_service: SearchServicePort,
        record_store: RecordStorePort,
        on_state_changed: Optional[Callable[[SearchCursor], None]] = None,
        on_scroll_to_top: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
        discard_stale_responses: bool = True,
    ):
        """Initialize PaginationCoordinator.

        Args:
            search_service: Fetches one page of results for (keyword, page)
            record_store: Receives every fetched record keyed by its href
            on_state_changed: Called with the cursor whenever a fetch settles
            on_scroll_to_top: Called when a page-1 fetch starts
            on_error: Called with a message when a fetch fails
            discard_stale_responses: Drop replies from superseded searches
        """
        self.search_service = search_service
        self.record_store = record_store
        self.on_state_changed = on_state_changed
        self.on_scroll_to_top = on_scroll_to_top
        self.on_error = on_error
        self.discard_stale_responses = discard_stale_responses

        self.pagination = PaginationManager()
        self._page_map = PageMap()
        self._visible_keys: List[str] = []

        # Bumped each time a page-1 reply replaces the page map
        self._generation = 0
        # Bumped each time a page-1 request is issued
        self._reset_requests = 0

    @property
    def cursor(self) -> SearchCursor:
        return self.pagination.cursor

    @property
    def page_map(self) -> PageMap:
        return self._page_map

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more

    @property
    def is_refreshing(self) -> bool:
        return self.pagination.refreshing

    @property
    def is_loading_more(self) -> bool:
        return self.pagination.loading_more

    @property
    def loading(self) -> bool:
        return self.pagination.loading

    def get_visible_keys(self) -> List[str]:
        return list(self._visible_keys)

    async def submit_search(self, keyword: str) -> bool:
        """Start a new search and replace the result list with its first page.

        Returns True when the page map was replaced.
        """
        keyword = (keyword or "").strip()
        if not keyword:
            logger.debug("Ignoring search with empty keyword")
            return False

        logger.info(f"Searching for: '{keyword}'")
        return await self._load_first_page(keyword)

    async def refresh(self) -> bool:
        """Re-fetch page 1 for the current keyword."""
        keyword = self.pagination.keyword
        if not keyword:
            logger.debug("Ignoring refresh without an active search")
            return False

        logger.info(f"Refreshing results for: '{keyword}'")
        return await self._load_first_page(keyword)

    async def load_more(self) -> bool:
        """Fetch and append the page after the current one.

        A no-op while another load more is running or when there are no
        further pages.
        """
        if self.pagination.loading_more:
            logger.debug("Load more already in progress")
            return False
        if not self.pagination.can_load_more():
            logger.debug(f"Nothing more to load (cursor: {self.cursor})")
            return False

        keyword = self.pagination.keyword
        page = self.pagination.current_page + 1
        generation = self._generation

        self.pagination.loading_more = True
        try:
            result = await self._fetch(keyword, page)
            if result is None:
                return False

            if self.discard_stale_responses and (
                generation != self._generation or keyword != self.pagination.keyword
            ):
                logger.info(
                    f"Discarding page {page} for '{keyword}': "
                    f"results were reset while it was loading"
                )
                return False

            self._page_map = self._page_map.with_page(page, result.keys())
            self.pagination.advance(page, result.pagination.total_pages)
            self._recompute_visible_keys()
            logger.info(
                f"Loaded page {page}/{self.pagination.total_pages} "
                f"({len(result.items)} items, {len(self._visible_keys)} visible)"
            )
            return True
        finally:
            self.pagination.loading_more = False
            self._notify_state_changed()

    async def _load_first_page(self, keyword: str) -> bool:
        self._reset_requests += 1
        request_id = self._reset_requests

        if self.on_scroll_to_top:
            self.on_scroll_to_top()

        self.pagination.start_refresh()
        try:
            result = await self._fetch(keyword, 1)
            if result is None:
                return False

            if self.discard_stale_responses and request_id != self._reset_requests:
                logger.info(f"Discarding page 1 for '{keyword}': a newer search was issued")
                return False

            self._page_map = PageMap.first_page(result.keys())
            self._generation += 1
            self.pagination.reset(keyword, result.pagination.total_pages)
            self._recompute_visible_keys()
            logger.info(
                f"Loaded page 1/{self.pagination.total_pages} for '{keyword}' "
                f"({len(result.items)} items)"
            )
            return True
        finally:
            self.pagination.finish_refresh()
            self._notify_state_changed()

    async def _fetch(self, keyword: str, page: int) -> Optional[SearchPage]:
        """Fetch one page and store its records.

        Returns None when the fetch failed or the reply had no result list.
        """
        self.pagination.start_loading()
        try:
            result = await self.search_service.search(keyword, page)
        except SearchServiceError as e:
            logger.error(f"Search failed for '{keyword}' page {page}: {e}")
            self._report_error(f"Search failed: {e}")
            return None
        except Exception as e:
            logger.exception(f"Unexpected error searching '{keyword}' page {page}: {e}")
            self._report_error(f"Search failed: {e}")
            return None
        finally:
            self.pagination.finish_loading()

        if result is None or result.is_soft_empty:
            logger.warning(f"Reply for '{keyword}' page {page} has no result list, ignoring")
            return None

        if self.discard_stale_responses and result.query is not None and result.query != keyword:
            logger.warning(f"Reply for page {page} answers '{result.query}', not '{keyword}', ignoring")
            return None

        current_page = result.pagination.current_page
        if current_page != page:
            logger.warning(f"Requested page {page} for '{keyword}' but reply says page {current_page}")

        for record in result.items:
            self.record_store.put(record.key, record)
        return result

    def _recompute_visible_keys(self) -> None:
        self._visible_keys = self._page_map.flatten()

    def _notify_state_changed(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self.cursor)

    def _report_error(self, message: str) -> None:
        if self.on_error:
            self.on_error(message)
