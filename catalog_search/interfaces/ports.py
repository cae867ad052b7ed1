"""Protocol definitions for dependency injection."""

from typing import Optional, Protocol

from catalog_search.domain.models import Record, SearchPage


class SearchServicePort(Protocol):
    async def search(self, keyword: str, page: int = 1) -> SearchPage: ...


class RecordStorePort(Protocol):
    def put(self, key: str, record: Record) -> None: ...

    def get(self, key: str) -> Optional[Record]: ...
