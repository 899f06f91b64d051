"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so tests can substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from quote_keeper.core.models import ConsoleColor, ParseResult, SpanStatus


class Span(Protocol):
    """A bounded unit of tracing context around one operation."""

    def set_attribute(self, key: str, value: Any) -> None:
        ...  # pragma: no cover

    def set_status(self, status: SpanStatus, description: str | None = None) -> None:
        ...  # pragma: no cover

    def record_exception(self, exc: BaseException) -> None:
        """Attach *exc* to the span as an ``exception`` event."""
        ...  # pragma: no cover


class Tracer(Protocol):
    """Hands out spans; the observability handle shared by all handlers."""

    def start_span(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
    ) -> AbstractContextManager[Span]:
        """Open a span that is closed on every exit path of the ``with`` body."""
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Line-oriented destination for quote text."""

    def set_colors(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        ...  # pragma: no cover

    def write_line(self, text: str) -> None:
        ...  # pragma: no cover


class CommandParams(Protocol):
    """Typed parameter struct built from a successful parse."""

    @classmethod
    def from_result(cls, result: ParseResult) -> CommandParams:
        ...  # pragma: no cover
