"""Domain types shared by the coordinator, cache and presentation bridge."""

from .models import DetailRoute, Pagination, Record, SearchCursor, SearchPage
from .page_map import PageMap

__all__ = [
    "DetailRoute",
    "PageMap",
    "Pagination",
    "Record",
    "SearchCursor",
    "SearchPage",
]
