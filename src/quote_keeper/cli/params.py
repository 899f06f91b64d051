"""Typed parameter structs, one per leaf command.

Each struct is built directly from a successful
:class:`~quote_keeper.core.models.ParseResult` by looking up the values
bound to its definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quote_keeper.cli.definitions import (
    BYLINE_ARGUMENT,
    DELAY_OPTION,
    FILE_OPTION,
    FOREGROUND_COLOR_OPTION,
    LIGHT_MODE_OPTION,
    QUOTE_ARGUMENT,
    SEARCH_TERMS_OPTION,
)
from quote_keeper.core.models import ConsoleColor, ParseResult


@dataclass(frozen=True, slots=True)
class ReadParams:
    file: Path
    delay: int
    fgcolor: ConsoleColor
    light_mode: bool

    @classmethod
    def from_result(cls, result: ParseResult) -> ReadParams:
        return cls(
            file=result.value_for(FILE_OPTION),
            delay=result.value_for(DELAY_OPTION),
            fgcolor=result.value_for(FOREGROUND_COLOR_OPTION),
            light_mode=result.value_for(LIGHT_MODE_OPTION),
        )


@dataclass(frozen=True, slots=True)
class DeleteParams:
    file: Path
    search_terms: tuple[str, ...]

    @classmethod
    def from_result(cls, result: ParseResult) -> DeleteParams:
        return cls(
            file=result.value_for(FILE_OPTION),
            search_terms=tuple(result.value_for(SEARCH_TERMS_OPTION)),
        )


@dataclass(frozen=True, slots=True)
class AddParams:
    file: Path
    quote: str
    byline: str

    @classmethod
    def from_result(cls, result: ParseResult) -> AddParams:
        return cls(
            file=result.value_for(FILE_OPTION),
            quote=result.value_for(QUOTE_ARGUMENT),
            byline=result.value_for(BYLINE_ARGUMENT),
        )
