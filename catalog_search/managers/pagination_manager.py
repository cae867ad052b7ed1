"""Cursor and loading-flag state for infinite scroll."""

from catalog_search.domain.models import SearchCursor


class PaginationManager:
    def __init__(self):
        self.keyword = ""
        self.current_page = 1
        self.total_pages = 1
        self.loading_more = False
        self._refreshes = 0
        self._in_flight = 0

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def refreshing(self) -> bool:
        return self._refreshes > 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def cursor(self) -> SearchCursor:
        return SearchCursor(
            keyword=self.keyword,
            current_page=self.current_page,
            total_pages=self.total_pages,
        )

    def can_load_more(self) -> bool:
        return bool(self.keyword) and self.has_more and not self.loading_more

    def start_loading(self) -> None:
        self._in_flight += 1

    def finish_loading(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)

    def start_refresh(self) -> None:
        self._refreshes += 1

    def finish_refresh(self) -> None:
        self._refreshes = max(0, self._refreshes - 1)

    def reset(self, keyword: str = "", total_pages: int = 1) -> None:
        self.keyword = keyword
        self.current_page = 1
        self.total_pages = max(1, total_pages)

    def advance(self, page: int, total_pages: int) -> None:
        self.current_page = page
        self.total_pages = max(1, total_pages)
