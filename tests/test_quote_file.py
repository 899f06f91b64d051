"""Tests for whole-file quote access (infra/quote_file.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from quote_keeper.exceptions import OperationError
from quote_keeper.infra.quote_file import append_text, read_lines, write_lines


class TestReadLines:
    def test_reads_without_terminators(self, quotes_file: Path) -> None:
        assert read_lines(quotes_file) == ["apple", "banana", "cherry"]

    def test_missing_file_maps_to_operation_error(self, tmp_path: Path) -> None:
        missing = tmp_path / "gone.txt"
        with pytest.raises(OperationError) as exc_info:
            read_lines(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_utf8_maps_to_operation_error(self, tmp_path: Path) -> None:
        target = tmp_path / "latin1.txt"
        target.write_bytes(b"caf\xe9\n")
        with pytest.raises(OperationError) as exc_info:
            read_lines(target)
        assert exc_info.value.path == target
        assert "UTF-8" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_splits_only_on_line_breaks(self, tmp_path: Path) -> None:
        target = tmp_path / "mixed.txt"
        target.write_bytes("page one\x0cpage two\r\nsep\u2028line\rlast".encode())
        assert read_lines(target) == ["page one\x0cpage two", "sep\u2028line", "last"]


class TestWriteLines:
    def test_overwrites_whole_file(self, quotes_file: Path) -> None:
        write_lines(quotes_file, ["only"])
        assert quotes_file.read_text(encoding="utf-8") == "only\n"

    def test_empty_sequence_truncates(self, quotes_file: Path) -> None:
        write_lines(quotes_file, [])
        assert quotes_file.read_text(encoding="utf-8") == ""

    def test_directory_target_fails(self, tmp_path: Path) -> None:
        with pytest.raises(OperationError):
            write_lines(tmp_path, ["x"])


class TestAppendText:
    def test_appends_after_existing_content(self, quotes_file: Path) -> None:
        append_text(quotes_file, "tail\n")
        assert quotes_file.read_text(encoding="utf-8").endswith("cherry\ntail\n")

    def test_creates_missing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "new.txt"
        append_text(target, "x")
        assert target.read_text(encoding="utf-8") == "x"
