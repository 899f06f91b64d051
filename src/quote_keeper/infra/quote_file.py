"""Infrastructure: whole-file access to the plain-text quote file.

This module is the **only** place that opens the quote file.  Every
``OSError`` and decode failure is caught here and re-raised as
:class:`~quote_keeper.exceptions.OperationError`.

Rules
-----
* Reads load every line before returning; writes replace the file in a
  single call.  No in-place streaming edits.
* Lines end only at ``\n``, ``\r`` or ``\r\n``.  Form feeds and Unicode
  line separators stay inside the line they appear in.
* Appends never rewrite existing content and are flushed before return.
* No user-facing output.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from quote_keeper.exceptions import OperationError

ENCODING = "utf-8"


def read_lines(path: Path) -> list[str]:
    """Return the lines of *path* without their line terminators."""
    try:
        with path.open(encoding=ENCODING) as handle:
            return [line.removesuffix("\n") for line in handle]
    except UnicodeDecodeError as exc:
        raise OperationError(
            f"Could not decode {path} as UTF-8",
            path=path,
            hint="Re-save the file with UTF-8 encoding.",
        ) from exc
    except OSError as exc:
        raise OperationError(
            f"Could not read {path}: {exc.strerror or exc}",
            path=path,
        ) from exc


def write_lines(path: Path, lines: Iterable[str]) -> None:
    """Overwrite *path* with *lines*, each followed by a newline."""
    content = "".join(f"{line}\n" for line in lines)
    try:
        path.write_text(content, encoding=ENCODING)
    except OSError as exc:
        raise OperationError(
            f"Could not write {path}: {exc.strerror or exc}",
            path=path,
        ) from exc


def append_text(path: Path, text: str) -> None:
    """Append *text* to *path* and flush before returning."""
    try:
        with path.open("a", encoding=ENCODING) as handle:
            handle.write(text)
            handle.flush()
    except OSError as exc:
        raise OperationError(
            f"Could not append to {path}: {exc.strerror or exc}",
            path=path,
        ) from exc
