"""Catalog records, search responses and cursor snapshots."""

from dataclasses import dataclass
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Record(BaseModel):
    """Full payload of one catalog entry, identified by its href"""

    model_config = ConfigDict(frozen=True, extra="allow")

    href: str = Field(min_length=1, description="Stable unique key of the record")
    title: str = ""
    cover: str = ""
    rating: Optional[Union[float, str]] = None
    year: Optional[Union[int, str]] = None
    type: str = ""
    description: str = ""

    @property
    def key(self) -> str:
        return self.href


class Pagination(BaseModel):
    """Pagination block of a search response"""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage", ge=1)
    total_pages: int = Field(alias="totalPages", ge=0)


class SearchPage(BaseModel):
    """One page of search results as returned by the search service.

    ``items`` is None when the reply carried no ``list`` field, which callers
    treat as a soft empty result rather than an error.
    """

    model_config = ConfigDict(populate_by_name=True)

    items: Optional[List[Record]] = Field(default=None, alias="list")
    pagination: Optional[Pagination] = None
    query: Optional[str] = None  # keyword echoed back by the service, if any

    @model_validator(mode="after")
    def check_pagination(self) -> "SearchPage":
        if self.items is not None and self.pagination is None:
            raise ValueError("result list without pagination metadata")
        return self

    @property
    def is_soft_empty(self) -> bool:
        return self.items is None

    def keys(self) -> List[str]:
        return [record.key for record in self.items or []]


@dataclass(frozen=True)
class SearchCursor:
    keyword: str = ""
    current_page: int = 1
    total_pages: int = 1

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class DetailRoute:
    """What the navigation layer needs to open a record's detail view."""

    name: str
    url: str
