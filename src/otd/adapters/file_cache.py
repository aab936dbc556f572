"""File-based daily record cache adapter."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Callable

from otd.core.record import Record

logger = logging.getLogger(__name__)

CACHE_FILE_NAME = "today.json"


class FileRecordCache:
    """
    Single-slot JSON cache keyed by the local calendar day.

    Implements RecordCache protocol. The entry is only good on the day it
    was written; any read or write problem degrades to a miss or a no-op.
    Concurrent processes may both write; last writer wins.
    """

    def __init__(self, cache_dir: Path | str, today: Callable[[], date] = date.today):
        self.cache_dir = Path(cache_dir).expanduser()
        self._today = today

    @property
    def path(self) -> Path:
        return self.cache_dir / CACHE_FILE_NAME

    def _ensure_dir(self) -> Path:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir

    def read(self) -> Record | None:
        """Return today's record, or None if missing, stale or unreadable."""
        try:
            path = self._ensure_dir() / CACHE_FILE_NAME
            entry = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"No cache file at {self.path}")
            return None
        except (OSError, ValueError, RecursionError) as e:
            logger.debug(f"Unreadable cache file {self.path}: {e}")
            return None

        try:
            cached_on = entry["Date"]
            record = Record.from_dict(entry["Data"])
        except (KeyError, TypeError) as e:
            logger.debug(f"Malformed cache entry in {self.path}: {e}")
            return None

        today = self._today().isoformat()
        if cached_on != today:
            logger.debug(f"Cache is from {cached_on}, today is {today}")
            return None

        return record

    def write(self, record: Record) -> None:
        """Overwrite the cache slot with record, stamped with today's date."""
        entry = {"Date": self._today().isoformat(), "Data": record.to_dict()}
        try:
            path = self._ensure_dir() / CACHE_FILE_NAME
            path.write_text(json.dumps(entry), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write cache file {self.path}: {e}")
