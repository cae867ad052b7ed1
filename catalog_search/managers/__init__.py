"""Manager classes for search and pagination state."""

from .pagination_coordinator import PaginationCoordinator
from .pagination_manager import PaginationManager
from .scroll_manager import ScrollManager
from .search_results_manager import SearchResultsManager

__all__ = [
    "PaginationCoordinator",
    "PaginationManager",
    "ScrollManager",
    "SearchResultsManager",
]
