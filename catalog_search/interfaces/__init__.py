"""Interfaces the coordinator depends on."""

from .ports import RecordStorePort, SearchServicePort

__all__ = ["RecordStorePort", "SearchServicePort"]
