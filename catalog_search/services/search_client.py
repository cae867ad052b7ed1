"""WebSocket client for the remote catalog search service."""

import asyncio
import json
import logging

import websockets
from pydantic import ValidationError
from websockets.exceptions import WebSocketException

from catalog_search.domain.models import SearchPage

logger = logging.getLogger("CatalogSearch.SearchClient")


class WebSocketSearchClient:
    """Fetches one page of search results per connection.

    Request: ``{"action": "search", "query": <keyword>, "page": <n>}``
    Reply: ``{"query": <keyword>, "list": [...], "pagination": {"currentPage": n, "totalPages": m}}``
    or ``{"type": "error", "message": ...}``.
    """

    def __init__(
        self,
        uri: str = "ws://localhost:8765",
        max_size: int = 5 * 1024 * 1024,
        open_timeout: float = 5.0,
    ):
        self.uri = uri
        self.max_size = max_size
        self.open_timeout = open_timeout

    async def search(self, keyword: str, page: int = 1) -> SearchPage:
        if not keyword:
            raise ValueError("keyword must not be empty")
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        request = {"action": "search", "query": keyword, "page": page}
        logger.debug(f"Requesting page {page} for '{keyword}' from {self.uri}")

        try:
            async with websockets.connect(
                self.uri, max_size=self.max_size, open_timeout=self.open_timeout
            ) as websocket:
                await websocket.send(json.dumps(request))
                message = await websocket.recv()
        except (WebSocketException, OSError, asyncio.TimeoutError) as e:
            raise SearchConnectionError(
                f"Search request to {self.uri} failed: {type(e).__name__}: {e}"
            ) from e

        return self.parse_response(message)

    @staticmethod
    def parse_response(message) -> SearchPage:
        """Decode and validate one reply from the search service."""
        try:
            data = json.loads(message)
        except (TypeError, ValueError) as e:
            raise SearchResponseError(f"Reply is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise SearchResponseError(f"Expected a JSON object, got {type(data).__name__}")

        if data.get("type") == "error":
            raise SearchResponseError(data.get("message") or "Search service reported an error")

        try:
            return SearchPage.model_validate(data)
        except ValidationError as e:
            raise SearchResponseError(f"Malformed search reply: {e.error_count()} error(s)") from e


# Exceptions for search service communication
class SearchServiceError(Exception):
    """Base exception for failed search requests"""
    pass


class SearchConnectionError(SearchServiceError):
    """Raised when the search service cannot be reached or drops the connection"""
    pass


class SearchResponseError(SearchServiceError):
    """Raised when the search service replies with an error or an unusable payload"""
    pass
