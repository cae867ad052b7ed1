"""Tests for ScrollManager."""

import pytest


def test_scroll_manager_far_from_end():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager(threshold=0.1)

    assert manager.on_scroll(offset=0, viewport_length=800, content_length=4000) is False


def test_scroll_manager_near_end_fires_once_per_content_length():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager(threshold=0.1)

    assert manager.on_scroll(offset=3150, viewport_length=800, content_length=4000) is True
    assert manager.on_scroll(offset=3180, viewport_length=800, content_length=4000) is False
    assert manager.on_scroll(offset=7150, viewport_length=800, content_length=8000) is True


def test_scroll_manager_rearms_after_leaving_threshold():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager(threshold=0.1)

    assert manager.on_scroll(offset=3200, viewport_length=800, content_length=4000) is True
    assert manager.on_scroll(offset=1000, viewport_length=800, content_length=4000) is False
    assert manager.on_scroll(offset=3200, viewport_length=800, content_length=4000) is True


def test_scroll_manager_reset():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager()

    assert manager.on_scroll(offset=3200, viewport_length=800, content_length=4000) is True
    manager.reset()
    assert manager.on_scroll(offset=3200, viewport_length=800, content_length=4000) is True


def test_scroll_manager_ignores_empty_layout():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager()

    assert manager.on_scroll(offset=0, viewport_length=0, content_length=0) is False


def test_scroll_manager_short_content_is_at_end():
    from catalog_search.managers.scroll_manager import ScrollManager

    manager = ScrollManager()

    assert manager.on_scroll(offset=0, viewport_length=800, content_length=500) is True


def test_scroll_manager_rejects_invalid_threshold():
    from catalog_search.managers.scroll_manager import ScrollManager

    with pytest.raises(ValueError):
        ScrollManager(threshold=0)
