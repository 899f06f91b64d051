"""Option and argument definitions for the ``quotes`` commands.

Definitions are module-level immutable values.  ``--file`` and
``--verbosity`` are attached to the root as global definitions; the rest
belong to a single subcommand.
"""

from __future__ import annotations

from pathlib import Path

from quote_keeper.core.models import (
    ConsoleColor,
    DefaultRule,
    LogLevel,
    ValueType,
    argument,
    option,
)

DEFAULT_QUOTES_FILE = "sampleQuotes.txt"


def _default_quotes_file() -> Path:
    return Path(DEFAULT_QUOTES_FILE)


FILE_OPTION = option(
    "--file",
    "An option whose argument is parsed as a file path.",
    value_type=ValueType.FILE,
    default=DefaultRule.computed(_default_quotes_file),
)

VERBOSITY_OPTION = option(
    "--verbosity",
    "Specifies the amount of information to display in the console.",
    value_type=ValueType.ENUM,
    enum_type=LogLevel,
    default=DefaultRule.static(LogLevel.ERROR),
)

DELAY_OPTION = option(
    "--delay",
    "Delay between lines, specified as milliseconds per character in a line.",
    value_type=ValueType.INT,
    default=DefaultRule.static(0),
)

FOREGROUND_COLOR_OPTION = option(
    "--fgcolor",
    "Specifies the foreground color. Choose a color that provides enough "
    "contrast with the background color. For example, a yellow foreground "
    "can't be read against a light mode background.",
    value_type=ValueType.ENUM,
    enum_type=ConsoleColor,
    default=DefaultRule.static(ConsoleColor.WHITE),
    help_label="--fgcolor <Black, White, Red, or Yellow>",
)

LIGHT_MODE_OPTION = option(
    "--light-mode",
    "Background color of text displayed on the console: "
    "default is black, light mode is white.",
    value_type=ValueType.BOOL,
    default=DefaultRule.static(False),
)

SEARCH_TERMS_OPTION = option(
    "--search-terms",
    "Strings to search for when deleting entries.",
    required=True,
    allows_multiple=True,
)

QUOTE_ARGUMENT = argument("quote", "Text of quote.")

BYLINE_ARGUMENT = argument("byline", "Byline of quote.")

GLOBAL_DEFINITIONS = (FILE_OPTION, VERBOSITY_OPTION)
