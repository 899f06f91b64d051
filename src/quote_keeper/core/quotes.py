"""Pure transforms over quote-file lines.

Nothing here touches the filesystem; the infra layer loads and stores
the lines, the CLI handlers glue both together.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def keep_line(line: str, search_terms: Sequence[str]) -> bool:
    """Return ``True`` when no search term occurs in *line*.

    Matching is case-sensitive plain substring containment.
    """
    return all(term not in line for term in search_terms)


def filter_lines(lines: Iterable[str], search_terms: Sequence[str]) -> list[str]:
    """Drop every line containing any of *search_terms*, preserving order."""
    return [line for line in lines if keep_line(line, search_terms)]


def format_entry(quote: str, byline: str) -> str:
    """Render the block appended by ``add``.

    Layout: blank separator, quote, blank line, ``-byline``; each of the
    two written records ends with a newline.
    """
    return f"\n\n{quote}\n\n-{byline}\n"


def pacing_delay(line: str, delay_ms: int) -> float:
    """Seconds to pause after writing *line* at *delay_ms* per character."""
    return max(delay_ms, 0) * len(line) / 1000
