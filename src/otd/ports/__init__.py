"""Ports - interfaces/protocols for external dependencies."""

from .page_source import PageSource
from .record_cache import RecordCache

__all__ = [
    "PageSource",
    "RecordCache",
]
