"""Record cache interface."""

from typing import Protocol

from otd.core.record import Record


class RecordCache(Protocol):
    """
    Interface for the daily record cache.

    Implementations never raise: a broken cache reads as a miss and a
    failed write is dropped.
    """

    def read(self) -> Record | None:
        """Return today's cached record, or None on a miss."""
        ...

    def write(self, record: Record) -> None:
        """Store record as today's entry, replacing whatever was there."""
        ...
