"""Regression tests for running without the optional Rich dependency.

Help, version and the quote commands must keep working with plain
``print`` output when Rich cannot be imported.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from quote_keeper.cli import exit_codes
from quote_keeper.cli.app import main
from quote_keeper.cli.console import PlainOutput, RichOutput, get_output


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "rich",
        "rich.console",
        "rich.logging",
        "rich.markup",
        "rich.panel",
        "rich.style",
        "rich.table",
        "rich.text",
    ):
        monkeypatch.setitem(sys.modules, name, None)


def test_get_output_prefers_rich() -> None:
    assert isinstance(get_output(), RichOutput)


def test_get_output_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert isinstance(get_output(), PlainOutput)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)
    assert main(["--help"]) == exit_codes.SUCCESS
    assert "Commands:" in capsys.readouterr().err


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert main(["--version"]) == exit_codes.SUCCESS


def test_read_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    quotes_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["quotes", "read", "--file", str(quotes_file)]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.splitlines() == ["apple", "banana", "cherry"]


def test_validation_errors_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)
    assert main(["quotes", "read", "--file", "nope.txt"]) == exit_codes.USAGE_ERROR
    assert "File does not exist" in capsys.readouterr().err
