"""Handlers for ``quotes read``, ``quotes delete`` and ``quotes add``.

Each handler opens a span around its body.  A failure marks the span as
failed, prints a short error line plus the failure detail on stderr, and
returns ``False``; nothing propagates past the command boundary.
"""

from __future__ import annotations

import asyncio
import logging

from quote_keeper.cli.console import console
from quote_keeper.cli.params import AddParams, DeleteParams, ReadParams
from quote_keeper.core.models import ConsoleColor, Services, SpanStatus
from quote_keeper.core.protocols import Span
from quote_keeper.core.quotes import filter_lines, format_entry, pacing_delay
from quote_keeper.exceptions import OperationError
from quote_keeper.infra import quote_file

logger = logging.getLogger(__name__)


def _report_failure(span: Span, headline: str, exc: Exception) -> None:
    span.set_status(SpanStatus.ERROR, str(exc))
    span.record_exception(exc)
    logger.debug("%s", headline, exc_info=exc)
    console.print(f"[bold red]{headline}[/bold red]")
    console.print(f"  {type(exc).__name__}: {exc}", markup=False)
    if isinstance(exc, OperationError) and exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")


async def read_quotes(params: ReadParams, services: Services) -> bool:
    """Print every line of the file, pausing ``delay`` ms per character."""
    attributes = {
        "file": str(params.file.absolute()),
        "delay": params.delay,
        "fgcolor": params.fgcolor.value,
        "light_mode": params.light_mode,
    }
    with services.tracer.start_span("Read File Command", attributes) as span:
        try:
            background = ConsoleColor.WHITE if params.light_mode else ConsoleColor.BLACK
            services.output.set_colors(params.fgcolor, background)
            lines = quote_file.read_lines(params.file)
            for line in lines:
                services.output.write_line(line)
                await asyncio.sleep(pacing_delay(line, params.delay))
        except (OperationError, OSError) as exc:
            _report_failure(span, "Error Reading File", exc)
            return False
        span.set_status(SpanStatus.OK)
    return True


def delete_quotes(params: DeleteParams, services: Services) -> bool:
    """Rewrite the file without lines containing any search term."""
    attributes = {
        "file": str(params.file.absolute()),
        "search_terms": ",".join(params.search_terms),
    }
    with services.tracer.start_span("Delete File Command", attributes) as span:
        try:
            lines = quote_file.read_lines(params.file)
            kept = filter_lines(lines, params.search_terms)
            quote_file.write_lines(params.file, kept)
        except OperationError as exc:
            _report_failure(span, "Error Deleting File", exc)
            return False
        span.set_attribute("lines_removed", len(lines) - len(kept))
        span.set_status(SpanStatus.OK)
    logger.info("Removed %d line(s) from %s", len(lines) - len(kept), params.file)
    return True


def add_quote(params: AddParams, services: Services) -> bool:
    """Append a quote block and its byline to the end of the file."""
    attributes = {
        "file": str(params.file.absolute()),
        "quote": params.quote,
        "byline": params.byline,
    }
    with services.tracer.start_span("Append to File Command", attributes) as span:
        try:
            quote_file.append_text(params.file, format_entry(params.quote, params.byline))
        except OperationError as exc:
            _report_failure(span, "Error Appending File", exc)
            return False
        span.set_status(SpanStatus.OK)
    logger.info("Appended quote by %s to %s", params.byline, params.file)
    return True
