"""Core layer — command model, parsing, dispatch and quote transforms.

Rules
-----
* No ``print()`` calls.
* No filesystem writes; the only read is the file-existence probe of
  file-reference validators.
* No imports from ``cli`` or ``infra``.
"""

from quote_keeper.core.dispatcher import dispatch
from quote_keeper.core.models import (
    Binding,
    CommandNode,
    ConsoleColor,
    Definition,
    LogLevel,
    ParseError,
    ParseResult,
    Services,
)
from quote_keeper.core.parser import Parser

__all__: list[str] = [
    "Binding",
    "CommandNode",
    "ConsoleColor",
    "Definition",
    "LogLevel",
    "ParseError",
    "ParseResult",
    "Parser",
    "Services",
    "dispatch",
]
