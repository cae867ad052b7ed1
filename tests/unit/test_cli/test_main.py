"""Tests for the command line front end."""

import asyncio

import pytest


def make_container(search_service):
    from catalog_search.config import Settings
    from catalog_search.core.di_container import AppContainer

    container = AppContainer.create(settings=Settings())
    container._search_client = search_service
    return container


def test_run_prints_loaded_pages(search_service, capsys):
    from catalog_search.main import run

    search_service.given_page("matrix", 1, ["k1", "k2"], total_pages=3)
    search_service.given_page("matrix", 2, ["k3"], total_pages=3)

    exit_code = asyncio.run(run("matrix", 2, make_container(search_service)))

    output = capsys.readouterr().out
    assert exit_code == 0
    assert search_service.calls == [("matrix", 1), ("matrix", 2)]
    assert "Title k1" in output
    assert "Title k3" in output
    assert "Showing 3 results (page 2 of 3)" in output


def test_run_stops_at_last_page(search_service):
    from catalog_search.main import run

    search_service.given_page("matrix", 1, ["k1"], total_pages=1)

    assert asyncio.run(run("matrix", 5, make_container(search_service))) == 0
    assert search_service.calls == [("matrix", 1)]


def test_run_reports_failed_search(search_service, capsys):
    from catalog_search.main import run

    assert asyncio.run(run("matrix", 1, make_container(search_service))) == 1
    assert "Search failed" in capsys.readouterr().err


def test_main_rejects_invalid_uri(tmp_path):
    from catalog_search.main import main

    with pytest.raises(SystemExit) as exc_info:
        main(["matrix", "--config", str(tmp_path / "none.yml"), "--uri", "http://nope"])

    assert exc_info.value.code == 2


def test_main_takes_positional_keyword_and_config_paths(tmp_path):
    from unittest.mock import patch

    from catalog_search.main import main

    config_path = tmp_path / "settings.yml"
    config_path.write_text("service:\n  uri: ws://cli.test:9000\n")
    calls = []

    async def fake_run(keyword, pages, container):
        calls.append((keyword, pages, container))
        return 0

    with patch("catalog_search.main.run", fake_run), patch("catalog_search.main.signal.signal"):
        code = main(["matrix", "--pages", "3", "--config", str(config_path)])

    assert code == 0
    keyword, pages, container = calls[0]
    assert keyword == "matrix"
    assert pages == 3
    assert container.paths.config_path == config_path
    assert container.settings.service.uri == "ws://cli.test:9000"
