"""CLI application entry point for quote-keeper.

This module is the **sole error boundary** for the entire application.
It catches :class:`~quote_keeper.exceptions.QuoteKeeperError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Flow
----
1. Parse the tokens against the tree from :func:`build_tree`.
2. Configure logging and build the per-invocation services from the
   parsed ``--verbosity``.
3. Render help, report validation errors, or dispatch to the handler.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from quote_keeper.cli import exit_codes
from quote_keeper.cli.commands import PROG, build_tree
from quote_keeper.cli.console import console, escape, get_output
from quote_keeper.cli.definitions import VERBOSITY_OPTION
from quote_keeper.cli.help import render_help
from quote_keeper.core.dispatcher import dispatch
from quote_keeper.core.models import LogLevel, Services
from quote_keeper.core.parser import MISSING_COMMAND, Parser
from quote_keeper.exceptions import QuoteKeeperError, ValidationError
from quote_keeper.infra.logging import configure_logging
from quote_keeper.infra.tracing import build_tracer
from quote_keeper.version import __version__

VERSION_TOKENS = frozenset({"-V", "--version"})


def build_services(verbosity: LogLevel) -> Services:
    """Create the collaborators shared by every handler of one invocation."""
    return Services(tracer=build_tracer(verbosity), output=get_output())


def _report_validation(error: ValidationError) -> None:
    for parse_error in error.errors:
        console.print(f"[bold red]Error:[/bold red] {escape(parse_error.message)}")
    if error.hint:
        console.print(f"[yellow]Hint:[/yellow] {error.hint}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the quote-keeper CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    if tokens and tokens[0] in VERSION_TOKENS:
        console.print(f"{PROG} {__version__}")
        return exit_codes.SUCCESS

    result = Parser(build_tree()).parse(tokens)

    if result.help_requested:
        render_help(result.path)
        return exit_codes.SUCCESS

    verbosity = result.values.get(VERBOSITY_OPTION.name, LogLevel.ERROR)
    configure_logging(verbosity)

    try:
        completed = dispatch(result, build_services(verbosity))
    except ValidationError as exc:
        _report_validation(exc)
        if any(error.message == MISSING_COMMAND for error in exc.errors):
            render_help(result.path)
        return exit_codes.USAGE_ERROR

    return exit_codes.SUCCESS if completed else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except QuoteKeeperError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
