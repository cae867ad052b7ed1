"""Services backing the search coordinator."""

from .result_cache import ResultCache
from .search_client import (
    SearchConnectionError,
    SearchResponseError,
    SearchServiceError,
    WebSocketSearchClient,
)

__all__ = [
    "ResultCache",
    "SearchConnectionError",
    "SearchResponseError",
    "SearchServiceError",
    "WebSocketSearchClient",
]
