"""otd CLI - Wikipedia's "On this day" in the terminal."""

import logging
import os
import sys

import click

from .adapters.wikipedia import FetchError
from .config import APP_VERSION, load_config
from .render import DEFAULT_WIDTH, render_record
from .workflows import get_record


def terminal_width() -> int:
    """Width from $COLUMNS when it's a positive integer, else 80."""
    cols = os.environ.get("COLUMNS", "")
    try:
        width = int(cols)
    except ValueError:
        return DEFAULT_WIDTH
    return width if width > 0 else DEFAULT_WIDTH


@click.command()
@click.option("--headless", is_flag=True, help="Print output and exit (no TUI)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(APP_VERSION, prog_name="otd")
def main(headless: bool, debug: bool):
    """Show today's historical events and famous birthdays."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()

    if headless:
        try:
            record = get_record(config)
        except FetchError as e:
            click.echo(f"Alas, there's been an error: {e}", err=True)
            sys.exit(1)

        color = sys.stdout.isatty()
        click.echo(render_record(record, terminal_width(), config.max_items, color=color))
        return

    from .tui import run_interactive

    state = run_interactive(lambda: get_record(config), config.max_items)
    if state.error is not None:
        sys.exit(1)


if __name__ == "__main__":
    main()
