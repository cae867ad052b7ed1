"""Keyword search over a remote catalog with paginated, infinitely scrolling results."""

__version__ = "0.1.0"
