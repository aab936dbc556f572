"""
Heuristic content extraction for the "On this day" page.

The page has no stable schema, so each field is pulled out by its own rule.
A rule that finds nothing returns its default; a rule that blows up on
unexpected markup is logged and also returns its default, so a layout
change breaks one field instead of the whole record.

Pure function - no I/O.
"""

import logging
from typing import Callable, TypeVar

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .record import DEFAULT_DATE, Birthday, Event, Record

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAIN_REGION = ".mw-parser-output"
DATE_LINKS = f"{MAIN_REGION} p b a"
EVENTS_LIST = f"{MAIN_REGION} ul"
BIRTHDAY_ITEMS = f"{MAIN_REGION} .hlist ul li"

DATE_EXCLUDED_PREFIX = "Wikipedia:"
# Tried in order; the first one present in the line wins.
EVENT_SEPARATORS = ("–", "-")
BIRTHDAY_MARKERS = ("(b.", "(d.")


def extract(markup: str | bytes) -> Record:
    """Parse page markup into a Record. Never raises on malformed input."""
    soup = _parse(markup)
    if soup is None:
        return Record()

    return Record(
        date=_apply(extract_date, soup, DEFAULT_DATE),
        events=_apply(extract_events, soup, ()),
        birthdays=_apply(extract_birthdays, soup, ()),
    )


def _parse(markup: str | bytes) -> BeautifulSoup | None:
    try:
        return BeautifulSoup(markup or "", "html.parser")
    except (ParserRejectedMarkup, TypeError, ValueError) as e:
        logger.warning(f"Could not parse page markup: {e}")
        return None


def _apply(rule: Callable[[BeautifulSoup], T], soup: BeautifulSoup, default: T) -> T:
    try:
        return rule(soup)
    except Exception as e:
        logger.warning(f"Extraction rule {rule.__name__} failed, using default: {e}")
        return default


# ============== Date ==============


def extract_date(soup: BeautifulSoup) -> str:
    """First bold paragraph link that isn't a Wikipedia: meta link."""
    date = first_match(
        (a.get_text() for a in soup.select(DATE_LINKS)),
        lambda text: not text.startswith(DATE_EXCLUDED_PREFIX),
    )
    return date or DEFAULT_DATE


# ============== Events ==============


def extract_events(soup: BeautifulSoup) -> tuple[Event, ...]:
    """Events come from the first list in the main region only."""
    events_list = soup.select_one(EVENTS_LIST)
    if events_list is None:
        return ()

    events = []
    for item in events_list.find_all("li"):
        event = parse_event_line(item.get_text())
        if event is not None:
            events.append(event)
    return tuple(events)


def parse_event_line(text: str) -> Event | None:
    """
    Split "YEAR – description" at the first separator.

    Lines without any separator keep their whole text with an empty year.
    Blank lines yield None.
    """
    separator = first_match(EVENT_SEPARATORS, lambda sep: sep in text)
    if separator is not None:
        year, _, description = text.partition(separator)
        return Event(year=year.strip(), text=description.strip())

    text = text.strip()
    if not text:
        return None
    return Event(year="", text=text)


# ============== Birthdays ==============


def extract_birthdays(soup: BeautifulSoup) -> tuple[Birthday, ...]:
    """Born/died entries from the horizontal list."""
    birthdays = []
    for item in soup.select(BIRTHDAY_ITEMS):
        text = item.get_text()
        if not any(marker in text for marker in BIRTHDAY_MARKERS):
            continue
        birthdays.append(
            Birthday(name=birthday_name(item, text), year_info=year_info(text))
        )
    return tuple(birthdays)


def birthday_name(item: Tag, text: str) -> str:
    """Bold text if there is any, otherwise whatever precedes the first '('."""
    bold = item.find("b")
    if bold is not None:
        name = bold.get_text()
        if name:
            return name

    idx = text.find("(")
    if idx == -1:
        return text
    return text[:idx].strip()


def year_info(text: str) -> str:
    """Contents of the last parenthetical, e.g. "b. 1920, d. 1990"."""
    idx = last_index(text, "(")
    if idx == -1:
        return ""

    info = text[idx:]
    if info.startswith("("):
        info = info[1:]
    if info.endswith(")"):
        info = info[:-1]
    return info


# ============== Tie-break policies ==============


def first_match(candidates, predicate: Callable[[T], bool]) -> T | None:
    """Return the first candidate (in iteration order) satisfying predicate."""
    for candidate in candidates:
        if predicate(candidate):
            return candidate
    return None


def last_index(text: str, needle: str) -> int:
    """Position of the last occurrence of needle, or -1."""
    return text.rfind(needle)
