"""Session-lifetime record cache keyed by record href."""

import logging
from typing import Dict, Iterable, List, Optional

from catalog_search.domain.models import Record

logger = logging.getLogger("CatalogSearch.ResultCache")


class ResultCache:
    """Unbounded key/value store of full records.

    Entries are never evicted; writing an existing key replaces the stored
    record (last write wins).
    """

    def __init__(self):
        self._records: Dict[str, Record] = {}

    def put(self, key: str, record: Record) -> None:
        self._records[key] = record

    def get(self, key: str) -> Optional[Record]:
        return self._records.get(key)

    def resolve(self, keys: Iterable[str]) -> List[Record]:
        """Look up keys in order, skipping any that are not cached."""
        records = []
        for key in keys:
            record = self._records.get(key)
            if record is None:
                logger.debug(f"Skipping uncached key: {key}")
                continue
            records.append(record)
        return records

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)
