"""Core dependency injection."""

from .di_container import AppContainer

__all__ = ["AppContainer"]
