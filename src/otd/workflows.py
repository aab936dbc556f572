"""Shared workflow layer between the headless and interactive views.

get_record() is the one operation callers use: today's record from the
cache when possible, otherwise fetched, extracted and cached.
"""

import logging

from .adapters.file_cache import FileRecordCache
from .adapters.wikipedia import WikipediaPageSource
from .config import Config, load_config
from .core.extract import extract
from .core.record import Record
from .ports import PageSource, RecordCache

logger = logging.getLogger(__name__)


def get_cache(config: Config) -> FileRecordCache:
    """Resolve the cache location from config."""
    return FileRecordCache(config.cache_dir)


def get_record(
    config: Config | None = None,
    cache: RecordCache | None = None,
    source: PageSource | None = None,
) -> Record:
    """
    Return today's record.

    Raises TransportError or StatusError when the page has to be fetched
    and can't be. Nothing is cached in that case.
    """
    if cache is None or source is None:
        config = config or load_config()
    cache = cache or get_cache(config)

    record = cache.read()
    if record is not None:
        logger.debug("Serving today's record from cache")
        return record

    source = source or WikipediaPageSource(config)
    markup = source.fetch()

    record = extract(markup)
    logger.debug(
        f"Extracted {len(record.events)} events and {len(record.birthdays)} birthdays for {record.date}"
    )

    cache.write(record)
    return record
