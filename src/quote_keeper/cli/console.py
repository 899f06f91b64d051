"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from quote_keeper.core.models import ConsoleColor
from quote_keeper.exceptions import EnvironmentError

RICH_COLORS: dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "black",
    ConsoleColor.DARK_BLUE: "blue",
    ConsoleColor.DARK_GREEN: "green",
    ConsoleColor.DARK_CYAN: "cyan",
    ConsoleColor.DARK_RED: "red",
    ConsoleColor.DARK_MAGENTA: "magenta",
    ConsoleColor.DARK_YELLOW: "yellow",
    ConsoleColor.GRAY: "white",
    ConsoleColor.DARK_GRAY: "bright_black",
    ConsoleColor.BLUE: "bright_blue",
    ConsoleColor.GREEN: "bright_green",
    ConsoleColor.CYAN: "bright_cyan",
    ConsoleColor.RED: "bright_red",
    ConsoleColor.MAGENTA: "bright_magenta",
    ConsoleColor.YELLOW: "bright_yellow",
    ConsoleColor.WHITE: "bright_white",
}


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance, targeting stderr by default."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup, highlight=False)


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is missing."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


console = _ConsoleProxy()


class RichOutput:
    """Stdout :class:`~quote_keeper.core.protocols.OutputSink` backed by Rich.

    Quote text is printed with ``markup=False`` so brackets in a quote
    are never interpreted as Rich markup.
    """

    def __init__(self, rich_console: Any | None = None) -> None:
        if rich_console is None:
            rich_console = get_rich_console(stderr=False)
        self._console: Any = rich_console
        self._style: Any = None

    def set_colors(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        from rich.style import Style

        self._style = Style(
            color=RICH_COLORS[foreground],
            bgcolor=RICH_COLORS[background],
        )

    def write_line(self, text: str) -> None:
        self._console.print(
            text,
            style=self._style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


class PlainOutput:
    """Uncoloured stdout sink used when Rich is unavailable."""

    def set_colors(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        return None

    def write_line(self, text: str) -> None:
        print(text, flush=True)


def get_output() -> RichOutput | PlainOutput:
    """Return the Rich-backed sink, falling back to plain ``print``."""
    try:
        return RichOutput()
    except EnvironmentError:
        return PlainOutput()
