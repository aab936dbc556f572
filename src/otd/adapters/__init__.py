"""Adapters - I/O implementations of ports."""

from .wikipedia import FetchError, StatusError, TransportError, WikipediaPageSource
from .file_cache import FileRecordCache

__all__ = [
    "FetchError",
    "StatusError",
    "TransportError",
    "WikipediaPageSource",
    "FileRecordCache",
]
