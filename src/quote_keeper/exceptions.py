"""Custom exception hierarchy for quote-keeper.

All exceptions that cross layer boundaries must inherit from
:class:`QuoteKeeperError`.  Raw ``OSError`` instances raised while
touching the quote file must NEVER propagate beyond the infrastructure
layer — they are caught and re-raised as :class:`OperationError`.

Hierarchy
---------
QuoteKeeperError
├── ValidationError
├── OperationError
├── DefinitionError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quote_keeper.core.models import ParseError


class QuoteKeeperError(Exception):
    """Base exception for all quote-keeper errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line input ----------------------------------------------------

class ValidationError(QuoteKeeperError):
    """Raised when dispatch is attempted on a result that carries errors."""

    def __init__(
        self,
        errors: Sequence[ParseError],
        *,
        hint: str | None = "Run with --help to see usage.",
    ) -> None:
        self.errors: tuple[ParseError, ...] = tuple(errors)
        super().__init__(
            "\n".join(error.message for error in self.errors),
            hint=hint,
        )


class DefinitionError(QuoteKeeperError):
    """Raised when the command tree itself is declared inconsistently."""


# --- File operations -------------------------------------------------------

class OperationError(QuoteKeeperError):
    """Raised when reading or writing the quote file fails."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: Path | None = path


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(QuoteKeeperError):
    """Raised when a required runtime dependency is not available."""
