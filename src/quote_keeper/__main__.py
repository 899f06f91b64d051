"""Allow ``python -m quote_keeper`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m quote_keeper`` behaves identically to the
``quote-keeper`` console script.
"""

from __future__ import annotations

from quote_keeper.cli.app import cli

if __name__ == "__main__":
    cli()
