"""Infrastructure: an in-process tracer with pluggable span exporters.

Each handler wraps its body in :meth:`Tracer.start_span`.  The span is
ended and exported on every exit path; an exception escaping the body
marks the span as failed before it propagates.

Exporting is opt-in: :func:`build_tracer` only attaches the
:class:`ConsoleSpanExporter` at ``Trace`` verbosity, so spans are still
recorded at other levels but go nowhere.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol

from quote_keeper.core.models import LogLevel, SpanStatus
from quote_keeper.infra.logging import TRACE
from quote_keeper.version import __version__

SERVICE_NAME = "quote-keeper"

_trace_logger = logging.getLogger("quote_keeper.trace")


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------

@dataclass
class RecordedSpan:
    """Concrete span; mutable only while its ``with`` block is open."""

    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    status: SpanStatus = SpanStatus.UNSET
    status_description: str | None = None
    events: list[dict[str, Any]] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def set_status(self, status: SpanStatus, description: str | None = None) -> None:
        self.status = status
        self.status_description = description

    def record_exception(self, exc: BaseException) -> None:
        self.events.append(
            {
                "name": "exception",
                "exception.type": type(exc).__name__,
                "exception.message": str(exc),
            }
        )

    def end(self) -> None:
        if self.end_time is None:
            self.end_time = time.perf_counter()

    @property
    def duration_ms(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time) * 1000


# ---------------------------------------------------------------------------
# Exporters
# ---------------------------------------------------------------------------

class SpanExporter(Protocol):
    def export(self, span: RecordedSpan, resource: Mapping[str, str]) -> None:
        ...  # pragma: no cover


class ConsoleSpanExporter:
    """Writes one ``TRACE`` log record per finished span."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _trace_logger

    def export(self, span: RecordedSpan, resource: Mapping[str, str]) -> None:
        attributes = ", ".join(f"{k}={v!r}" for k, v in span.attributes.items())
        duration = span.duration_ms or 0.0
        self._logger.log(
            TRACE,
            "span %r [%s] status=%s duration=%.1fms service=%s/%s attributes={%s}",
            span.name,
            span.status.value,
            span.status_description or span.status.name,
            duration,
            resource.get("service.name", "unknown"),
            resource.get("service.version", "unknown"),
            attributes,
        )
        for event in span.events:
            self._logger.log(
                TRACE,
                "  event %s: %s: %s",
                event["name"],
                event.get("exception.type", ""),
                event.get("exception.message", ""),
            )


class InMemorySpanExporter:
    """Keeps finished spans in a list; useful for inspection and tests."""

    def __init__(self) -> None:
        self.spans: list[RecordedSpan] = []

    def export(self, span: RecordedSpan, resource: Mapping[str, str]) -> None:
        self.spans.append(span)


# ---------------------------------------------------------------------------
# Tracer
# ---------------------------------------------------------------------------

class Tracer:
    """Satisfies :class:`~quote_keeper.core.protocols.Tracer` structurally.

    Parameters
    ----------
    service_name, service_version:
        Resource attributes stamped on every exported span.
    exporters:
        Receivers of each span once it has ended.
    """

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = __version__,
        exporters: Sequence[SpanExporter] = (),
    ) -> None:
        self.resource: dict[str, str] = {
            "service.name": service_name,
            "service.version": service_version,
        }
        self._exporters: tuple[SpanExporter, ...] = tuple(exporters)

    @contextmanager
    def start_span(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
    ) -> Iterator[RecordedSpan]:
        span = RecordedSpan(name=name, attributes=dict(attributes or {}))
        try:
            yield span
        except BaseException as exc:
            span.record_exception(exc)
            span.set_status(SpanStatus.ERROR, type(exc).__name__)
            raise
        finally:
            span.end()
            for exporter in self._exporters:
                exporter.export(span, self.resource)


def build_tracer(verbosity: LogLevel) -> Tracer:
    """Return the tracer for one invocation at *verbosity*."""
    exporters: list[SpanExporter] = []
    if verbosity.rank <= LogLevel.TRACE.rank:
        exporters.append(ConsoleSpanExporter())
    return Tracer(exporters=exporters)
