#!/usr/bin/env python3
"""
Catalog search - command line front end
Runs a keyword search and prints the merged result list.
"""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path

logger = logging.getLogger("CatalogSearch.CLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-search",
        description="Search the catalog and print the paginated results",
    )
    parser.add_argument("keyword", help="Search keyword")
    parser.add_argument(
        "--pages", type=int, default=1, help="Number of pages to load (default: 1)"
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to settings.yml")
    parser.add_argument("--uri", default=None, help="Override the search service URI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def run(keyword: str, pages: int, container) -> int:
    errors = []
    manager = container.create_results_manager(on_error=errors.append)

    manager.on_search_changed(keyword)
    await manager.on_search_activate()

    while manager.coordinator.cursor.current_page < pages and manager.coordinator.has_more:
        if not await manager.coordinator.load_more():
            break

    if errors and not manager.visible_records():
        print(errors[-1], file=sys.stderr)
        return 1

    for index, record in enumerate(manager.visible_records(), start=1):
        details = ", ".join(str(v) for v in (record.year, record.type, record.rating) if v)
        suffix = f" ({details})" if details else ""
        print(f"{index:3}. {record.title or record.href}{suffix}  {record.href}")

    if manager.status_text:
        print(manager.status_text)
    return 0


def main(argv=None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from pydantic import ValidationError

    from catalog_search.config import AppPaths, ServiceSettings, load_settings
    from catalog_search.core import AppContainer

    paths = AppPaths(config_path=args.config) if args.config else AppPaths.default()
    settings = load_settings(paths.config_path)
    if args.uri:
        try:
            service = ServiceSettings(**{**settings.service.model_dump(), "uri": args.uri})
        except ValidationError as e:
            build_parser().error(f"invalid --uri: {e.errors()[0]['msg']}")
        settings = settings.model_copy(update={"service": service})

    def signal_handler(sig, frame):
        print("Search interrupted", file=sys.stderr)
        sys.exit(130)

    signal.signal(signal.SIGINT, signal_handler)

    logger.info(f"Searching '{args.keyword}' via {settings.service.uri}")
    return asyncio.run(run(args.keyword, max(1, args.pages), AppContainer.create(settings, paths)))


if __name__ == "__main__":
    sys.exit(main())
