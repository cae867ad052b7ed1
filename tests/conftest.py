"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes.fake_search_service import FakeSearchService


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def search_service() -> FakeSearchService:
    return FakeSearchService()


@pytest.fixture
def result_cache():
    from catalog_search.services.result_cache import ResultCache

    return ResultCache()


@pytest.fixture
def coordinator(search_service, result_cache):
    from catalog_search.managers.pagination_coordinator import PaginationCoordinator

    return PaginationCoordinator(search_service, result_cache)
