"""Interactive full-screen view, driven by prompt_toolkit."""

import asyncio
import logging
from typing import Callable

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl

from .adapters.wikipedia import FetchError
from .config import DEFAULT_MAX_ITEMS
from .core.record import Record
from .core.viewer import Msg, ViewerState, update
from .render import DEFAULT_WIDTH, content_lines, footer, header, to_text

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1


def key_name(key: Keys | str) -> str:
    """prompt_toolkit key ("c-c", "pagedown", "j", ...) as a plain string."""
    return key.value if isinstance(key, Keys) else key


def screen(state: ViewerState, max_items: int = DEFAULT_MAX_ITEMS) -> str:
    """Compose the whole screen (ANSI-styled) for the current state."""
    if state.error is not None:
        return f"\nError: {state.error}\n\nPress q to quit."

    if not state.ready:
        return f"\n {state.spinner} Loading history...\n"

    width = state.width or DEFAULT_WIDTH
    top = to_text(header(state.record, width, max_items), width, color=True).rstrip("\n")
    body = state.visible_lines()
    body += [""] * (state.viewport_height - len(body))
    bottom = to_text(footer(), width, color=True).rstrip("\n")
    return "\n".join([top, *body, bottom])


class InteractiveView:
    """
    Full-screen scrollable view of today's record.

    load() runs on a worker thread; its result comes back into the loop as
    a data-ready or error message. Quitting stops the screen, not the load.
    """

    def __init__(self, load: Callable[[], Record], max_items: int = DEFAULT_MAX_ITEMS):
        self._load = load
        self.max_items = max_items
        self.state = ViewerState()
        self.app = Application(
            layout=Layout(Window(FormattedTextControl(self._formatted_screen), wrap_lines=False)),
            key_bindings=self._key_bindings(),
            full_screen=True,
        )

    def _key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add(Keys.Any)
        def _(event):
            self.dispatch(Msg.key(key_name(event.key_sequence[0].key)))

        return kb

    def _render_lines(self, record: Record, width: int) -> list[str]:
        return content_lines(record, width, self.max_items)

    def _apply(self, msg: Msg) -> None:
        self.state = update(self.state, msg, self._render_lines)

    def dispatch(self, msg: Msg) -> None:
        """Feed a message through the viewer and redraw (or exit)."""
        was_quit = self.state.quit
        self._apply(msg)
        if self.state.quit:
            if not was_quit:
                self.app.exit()
            return
        self.app.invalidate()

    def _formatted_screen(self) -> ANSI:
        size = self.app.output.get_size()
        if (size.columns, size.rows) != (self.state.width, self.state.height):
            # Already inside a redraw, so no invalidate here
            self._apply(Msg.resize(size.columns, size.rows))
        return ANSI(screen(self.state, self.max_items))

    async def _fetch(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            record = await loop.run_in_executor(None, self._load)
        except FetchError as e:
            logger.debug(f"Fetch failed: {e}")
            self.dispatch(Msg.error(e))
        except Exception as e:
            logger.exception("Loading today's record failed")
            self.dispatch(Msg.error(e))
        else:
            self.dispatch(Msg.data_ready(record))

    async def _tick(self) -> None:
        while not (self.state.ready or self.state.error is not None or self.state.quit):
            await asyncio.sleep(TICK_INTERVAL)
            self.dispatch(Msg.tick())

    def _start(self) -> None:
        self.app.create_background_task(self._fetch())
        self.app.create_background_task(self._tick())

    def run(self) -> ViewerState:
        """Run until a quit key is pressed. Returns the final state."""
        self.app.run(pre_run=self._start)
        return self.state


def run_interactive(load: Callable[[], Record], max_items: int = DEFAULT_MAX_ITEMS) -> ViewerState:
    return InteractiveView(load, max_items).run()
