"""Terminal rendering of a record with rich."""

from io import StringIO

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_MAX_ITEMS
from .core.record import Record

DEFAULT_WIDTH = 80

# Colors
SUBTLE = "#383838"
HIGHLIGHT = "#7D56F4"
SPECIAL = "#73F59F"
WARNING = "#F55385"
TEXT = "#DDDDDD"
MUTED = "#626262"

HEADER_TITLE_STYLE = f"bold #ffffff on {HIGHLIGHT}"
HEADER_DATE_STYLE = f"bold #ffffff on {WARNING}"
SECTION_STYLE = f"bold {SPECIAL}"
YEAR_STYLE = f"bold {WARNING}"
NAME_STYLE = f"bold {SPECIAL}"

YEAR_WIDTH = 6
TIMELINE = "│"
MIN_DESC_WIDTH = 20


def to_text(renderable: RenderableType, width: int, color: bool = False) -> str:
    """Render to a string, with ANSI styling only when color is set."""
    console = Console(
        file=StringIO(),
        width=width,
        force_terminal=color,
        color_system="truecolor" if color else None,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(renderable)
    return console.file.getvalue()


def _counts(record: Record, max_items: int) -> tuple[int, int]:
    return min(len(record.events), max_items), min(len(record.birthdays), max_items)


def header(record: Record, width: int, max_items: int = DEFAULT_MAX_ITEMS) -> Group:
    """Title badges, the displayed counts and a divider."""
    n_events, n_births = _counts(record, max_items)
    title = Text.assemble(
        (" ON THIS DAY ", HEADER_TITLE_STYLE),
        (f" {record.date} ", HEADER_DATE_STYLE),
        justify="center",
    )
    summary = Text(f"{n_events} events • {n_births} births", style=MUTED, justify="center")
    divider = Text("─" * max(0, width), style=SUBTLE)
    return Group(title, summary, divider)


def _section_title(title: str) -> Group:
    return Group(
        Text(),
        Text(title, style=SECTION_STYLE),
        Text("─" * len(title), style=SUBTLE),
        Text(),
    )


def content(record: Record, width: int, max_items: int = DEFAULT_MAX_ITEMS) -> Group:
    """The events timeline followed by the birthdays list."""
    desc_width = max(MIN_DESC_WIDTH, width - 12)

    timeline = Table.grid(padding=(0, 1))
    timeline.add_column(width=YEAR_WIDTH, justify="right", style=YEAR_STYLE)
    timeline.add_column(style=SUBTLE)
    timeline.add_column(width=desc_width, style=TEXT)
    for event in record.events[:max_items]:
        timeline.add_row(event.year, TIMELINE, event.text)

    births = [
        Text.assemble("• ", (b.name, NAME_STYLE), " ", (b.year_info, MUTED))
        for b in record.birthdays[:max_items]
    ]

    return Group(
        _section_title("Historical Events"),
        timeline,
        _section_title("Famous Birthdays"),
        *births,
    )


def content_lines(
    record: Record, width: int, max_items: int = DEFAULT_MAX_ITEMS, color: bool = True
) -> list[str]:
    """Content split into display lines, for the scrollable viewport."""
    return to_text(content(record, width, max_items), width, color).rstrip("\n").split("\n")


def render_record(
    record: Record, width: int, max_items: int = DEFAULT_MAX_ITEMS, color: bool = False
) -> str:
    """The full static view used by headless mode."""
    if width <= 0:
        width = DEFAULT_WIDTH
    page = Group(header(record, width, max_items), content(record, width, max_items))
    return to_text(page, width, color).rstrip("\n")


def footer() -> Text:
    return Text("j/k scroll • q quit", style=MUTED, justify="center")
