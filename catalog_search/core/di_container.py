"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from catalog_search.config import AppPaths, Settings, load_settings
from catalog_search.domain.models import DetailRoute
from catalog_search.managers import PaginationCoordinator, SearchResultsManager
from catalog_search.services import ResultCache, WebSocketSearchClient


@dataclass
class AppContainer:
    settings: Settings
    paths: AppPaths

    _result_cache: Optional[ResultCache] = field(
        default=None, init=False, repr=False
    )
    _search_client: Optional[WebSocketSearchClient] = field(
        default=None, init=False, repr=False
    )
    _coordinator: Optional[PaginationCoordinator] = field(
        default=None, init=False, repr=False
    )

    @property
    def result_cache(self) -> ResultCache:
        if self._result_cache is None:
            self._result_cache = ResultCache()
        return self._result_cache

    @property
    def search_client(self) -> WebSocketSearchClient:
        if self._search_client is None:
            service = self.settings.service
            self._search_client = WebSocketSearchClient(
                uri=service.uri,
                max_size=service.max_size,
                open_timeout=service.open_timeout,
            )
        return self._search_client

    @property
    def coordinator(self) -> PaginationCoordinator:
        if self._coordinator is None:
            self._coordinator = PaginationCoordinator(
                search_service=self.search_client,
                record_store=self.result_cache,
                discard_stale_responses=self.settings.coordinator.discard_stale_responses,
            )
        return self._coordinator

    def create_results_manager(
        self,
        on_navigate: Optional[Callable[[DetailRoute], None]] = None,
        on_scroll_to_top: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> SearchResultsManager:
        coordinator = self.coordinator
        if on_scroll_to_top is not None:
            coordinator.on_scroll_to_top = on_scroll_to_top
        if on_error is not None:
            coordinator.on_error = on_error
        return SearchResultsManager(
            coordinator,
            self.result_cache,
            columns=self.settings.display.columns,
            end_reached_threshold=self.settings.display.end_reached_threshold,
            on_navigate=on_navigate,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or load_settings(paths.config_path),
            paths=paths,
        )
