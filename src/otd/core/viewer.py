"""
Interactive viewer state machine - no I/O dependencies.

The terminal driver turns key presses, resizes, timer ticks and fetch
results into Msg values and feeds them through update(). Everything the
screen shows is derived from the resulting ViewerState.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

from .record import Record

SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 1

QUIT_KEYS = frozenset({"q", "escape", "c-c"})


class MsgKind(Enum):
    """The closed set of things the viewer reacts to."""

    RESIZE = "resize"
    KEY = "key"
    TICK = "tick"
    DATA_READY = "data_ready"
    ERROR = "error"


@dataclass(frozen=True)
class Msg:
    """A message for the viewer loop. Payload depends on kind."""

    kind: MsgKind
    payload: object = None

    @classmethod
    def resize(cls, width: int, height: int) -> "Msg":
        return cls(MsgKind.RESIZE, (width, height))

    @classmethod
    def key(cls, name: str) -> "Msg":
        return cls(MsgKind.KEY, name)

    @classmethod
    def tick(cls) -> "Msg":
        return cls(MsgKind.TICK)

    @classmethod
    def data_ready(cls, record: Record) -> "Msg":
        return cls(MsgKind.DATA_READY, record)

    @classmethod
    def error(cls, err: Exception) -> "Msg":
        return cls(MsgKind.ERROR, err)


# Renders a record at a given width into display lines
ContentRenderer = Callable[[Record, int], list[str]]


@dataclass(frozen=True)
class ViewerState:
    """Everything the interactive screen needs to draw itself."""

    width: int = 0
    height: int = 0
    record: Record | None = None
    error: Exception | None = None
    lines: tuple[str, ...] = field(default_factory=tuple)
    offset: int = 0
    spinner_frame: int = 0
    quit: bool = False

    @property
    def ready(self) -> bool:
        return self.record is not None

    @property
    def viewport_height(self) -> int:
        return max(0, self.height - HEADER_HEIGHT - FOOTER_HEIGHT)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.viewport_height)

    @property
    def spinner(self) -> str:
        return SPINNER_FRAMES[self.spinner_frame % len(SPINNER_FRAMES)]

    def visible_lines(self) -> list[str]:
        """The slice of content currently inside the viewport."""
        return list(self.lines[self.offset : self.offset + self.viewport_height])


def update(state: ViewerState, msg: Msg, render: ContentRenderer) -> ViewerState:
    """
    Apply one message to the viewer state.

    Pure function - no I/O. The renderer is only called when the record or
    the width changes.
    """
    if state.quit:
        return state

    match msg.kind:
        case MsgKind.KEY:
            return _handle_key(state, msg.payload)
        case MsgKind.RESIZE:
            width, height = msg.payload
            state = replace(state, width=width, height=height)
            if state.ready and width > 0:
                state = replace(state, lines=tuple(render(state.record, width)))
            return _scroll_to(state, state.offset)
        case MsgKind.TICK:
            if state.ready or state.error is not None:
                return state
            return replace(state, spinner_frame=(state.spinner_frame + 1) % len(SPINNER_FRAMES))
        case MsgKind.DATA_READY:
            state = replace(state, record=msg.payload, offset=0)
            if state.width > 0:
                state = replace(state, lines=tuple(render(state.record, state.width)))
            return state
        case MsgKind.ERROR:
            return replace(state, error=msg.payload)

    return state


def _handle_key(state: ViewerState, key: str) -> ViewerState:
    if key in QUIT_KEYS:
        return replace(state, quit=True)

    # Scrolling only makes sense once there's content and no error screen
    if not state.ready or state.error is not None:
        return state

    page = max(1, state.viewport_height)
    half = max(1, page // 2)

    match key:
        case "j" | "down":
            return _scroll_to(state, state.offset + 1)
        case "k" | "up":
            return _scroll_to(state, state.offset - 1)
        case "f" | "pagedown" | " ":
            return _scroll_to(state, state.offset + page)
        case "b" | "pageup":
            return _scroll_to(state, state.offset - page)
        case "d":
            return _scroll_to(state, state.offset + half)
        case "u":
            return _scroll_to(state, state.offset - half)
        case "g" | "home":
            return _scroll_to(state, 0)
        case "G" | "end":
            return _scroll_to(state, state.max_offset)

    return state


def _scroll_to(state: ViewerState, offset: int) -> ViewerState:
    return replace(state, offset=min(max(0, offset), state.max_offset))
