"""Functional core - pure extraction and view logic with no I/O."""

from .record import DEFAULT_DATE, Birthday, Event, Record
from .extract import extract, parse_event_line
from .viewer import Msg, MsgKind, ViewerState, update

__all__ = [
    # Record
    "DEFAULT_DATE",
    "Birthday",
    "Event",
    "Record",
    # Extraction
    "extract",
    "parse_event_line",
    # Viewer
    "Msg",
    "MsgKind",
    "ViewerState",
    "update",
]
