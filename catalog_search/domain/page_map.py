"""Immutable page-number to key-list mapping."""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

PageKeys = Tuple[str, ...]


class PageMap:
    """Ordered key lists per page, stored in an array indexed by ``page - 1``.

    Every change returns a new map; pages never fetched are ``None`` slots.
    Storing page 1 drops every later page.
    """

    __slots__ = ("_pages",)

    def __init__(self, pages: Sequence[Optional[Iterable[str]]] = ()):
        self._pages: Tuple[Optional[PageKeys], ...] = tuple(
            None if keys is None else tuple(keys) for keys in pages
        )

    @classmethod
    def first_page(cls, keys: Iterable[str]) -> "PageMap":
        return cls((tuple(keys),))

    def with_page(self, page: int, keys: Iterable[str]) -> "PageMap":
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page == 1:
            return PageMap.first_page(keys)

        pages: List[Optional[PageKeys]] = list(self._pages)
        if len(pages) < page:
            pages.extend([None] * (page - len(pages)))
        pages[page - 1] = tuple(keys)
        return PageMap(pages)

    def get(self, page: int) -> Optional[PageKeys]:
        if page < 1 or page > len(self._pages):
            return None
        return self._pages[page - 1]

    @property
    def highest_page(self) -> int:
        return len(self._pages)

    def pages(self) -> Iterator[Tuple[int, PageKeys]]:
        for index, keys in enumerate(self._pages):
            if keys is not None:
                yield index + 1, keys

    def flatten(self) -> List[str]:
        """Concatenate pages in ascending order; duplicate keys are kept."""
        visible: List[str] = []
        for _, keys in self.pages():
            visible.extend(keys)
        return visible

    def __contains__(self, page: object) -> bool:
        return isinstance(page, int) and self.get(page) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.pages())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageMap):
            return NotImplemented
        return self._pages == other._pages

    def __hash__(self) -> int:
        return hash(self._pages)

    def __repr__(self) -> str:
        return f"PageMap({dict(self.pages())!r})"
