"""Shared pytest fixtures and configuration for the quote-keeper test suite.

Guidelines
----------
* Quote files live under ``tmp_path`` only.
* Every test runs with ``tmp_path`` as the working directory so the
  fallback ``sampleQuotes.txt`` never leaks in from the repo.
* Handlers are exercised with in-memory output and span exporters.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from quote_keeper.core.models import ConsoleColor, Services
from quote_keeper.infra.tracing import InMemorySpanExporter, Tracer

SAMPLE_LINES = ["apple", "banana", "cherry"]


class RecordingOutput:
    """OutputSink that keeps everything in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.colors: list[tuple[ConsoleColor, ConsoleColor]] = []

    def set_colors(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        self.colors.append((foreground, background))

    def write_line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def quotes_file(tmp_path: Path) -> Path:
    path = tmp_path / "quotes.txt"
    path.write_text("".join(f"{line}\n" for line in SAMPLE_LINES), encoding="utf-8")
    return path


@pytest.fixture()
def exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture()
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture()
def services(exporter: InMemorySpanExporter, output: RecordingOutput) -> Services:
    return Services(tracer=Tracer(exporters=[exporter]), output=output)
