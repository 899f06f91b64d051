"""End-to-end tests for ``main()`` (cli/app.py).

Each test drives the full pipeline — parse, validate, dispatch, file
operation — against files under ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from quote_keeper.cli import exit_codes
from quote_keeper.cli.app import main


class TestRead:
    def test_prints_lines(self, quotes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["quotes", "read", "--file", str(quotes_file)])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == ["apple", "banana", "cherry"]

    def test_same_output_twice(self, quotes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["quotes", "read", "--file", str(quotes_file), "--delay", "0"])
        first = capsys.readouterr().out
        main(["quotes", "read", "--file", str(quotes_file), "--delay", "0"])
        assert capsys.readouterr().out == first

    def test_quote_text_is_not_markup(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "brackets.txt"
        target.write_text("[bold]not bold[/bold]\n", encoding="utf-8")
        main(["quotes", "read", "--file", str(target)])
        assert capsys.readouterr().out.strip() == "[bold]not bold[/bold]"

    def test_nonexistent_file_is_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["quotes", "read", "--file", "war-and-peace.txt"])
        assert code == exit_codes.USAGE_ERROR
        captured = capsys.readouterr()
        assert "File does not exist" in captured.err
        assert captured.out == ""

    def test_missing_fallback_file_is_operation_failure(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["quotes", "read"])
        assert code == exit_codes.GENERAL_ERROR
        assert "Error Reading File" in capsys.readouterr().err

    def test_fallback_file_in_working_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "sampleQuotes.txt").write_text("from the fallback\n", encoding="utf-8")
        assert main(["quotes", "read"]) == exit_codes.SUCCESS
        assert "from the fallback" in capsys.readouterr().out

    def test_trace_verbosity_exports_span(
        self, quotes_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["quotes", "read", "--file", str(quotes_file), "--verbosity", "Trace"])
        assert "Read File Command" in capsys.readouterr().err

    def test_default_verbosity_is_quiet(
        self, quotes_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["quotes", "read", "--file", str(quotes_file)])
        assert "Read File Command" not in capsys.readouterr().err


class TestDelete:
    def test_removes_matching_lines(self, quotes_file: Path) -> None:
        code = main(
            ["quotes", "delete", "--file", str(quotes_file), "--search-terms", "a", "b"]
        )
        assert code == exit_codes.SUCCESS
        assert quotes_file.read_text(encoding="utf-8") == "cherry\n"

    def test_missing_terms_leaves_file_alone(
        self, quotes_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        before = quotes_file.read_text(encoding="utf-8")
        code = main(["quotes", "delete", "--file", str(quotes_file)])
        assert code == exit_codes.USAGE_ERROR
        assert quotes_file.read_text(encoding="utf-8") == before
        assert "Option '--search-terms' is required." in capsys.readouterr().err


class TestAdd:
    @pytest.mark.parametrize("verb", ["add", "insert"])
    def test_appends_entry(self, tmp_path: Path, verb: str) -> None:
        target = tmp_path / "empty.txt"
        target.write_text("", encoding="utf-8")
        code = main(["quotes", verb, "Hello", "World", "--file", str(target)])
        assert code == exit_codes.SUCCESS
        assert target.read_text(encoding="utf-8") == "\n\nHello\n\n-World\n"

    def test_missing_byline(self, quotes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["quotes", "add", "Hello", "--file", str(quotes_file)])
        assert code == exit_codes.USAGE_ERROR
        assert "byline" in capsys.readouterr().err


class TestHelpAndUsage:
    def test_subcommand_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["quotes", "read", "-h"]) == exit_codes.SUCCESS
        assert "Read and display the file." in capsys.readouterr().err

    def test_help_ignores_validation_errors(self) -> None:
        assert main(["quotes", "delete", "--help"]) == exit_codes.SUCCESS

    def test_missing_subcommand_shows_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["quotes"]) == exit_codes.USAGE_ERROR
        err = capsys.readouterr().err
        assert "Required command was not provided." in err
        assert "Commands:" in err

    def test_all_errors_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["quotes", "read", "--fgcolor", "Purple", "--delay", "soon"])
        err = capsys.readouterr().err
        assert "'Purple'" in err
        assert "'soon'" in err
