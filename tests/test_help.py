"""Tests for help content and rendering (cli/help.py)."""

from __future__ import annotations

import sys

import pytest

from quote_keeper.cli.commands import build_tree
from quote_keeper.cli.definitions import (
    DELAY_OPTION,
    FOREGROUND_COLOR_OPTION,
    QUOTE_ARGUMENT,
    SEARCH_TERMS_OPTION,
    VERBOSITY_OPTION,
)
from quote_keeper.cli.help import (
    help_sections,
    option_description,
    option_label,
    render_help,
    usage_line,
)


def _path(*names: str):
    node = build_tree()
    path = [node]
    for name in names:
        node = node.children[name]
        path.append(node)
    return tuple(path)


class TestLabels:
    def test_help_label_override(self) -> None:
        assert option_label(FOREGROUND_COLOR_OPTION) == "--fgcolor <Black, White, Red, or Yellow>"

    def test_enum_placeholder_lists_choices(self) -> None:
        assert option_label(VERBOSITY_OPTION).startswith("--verbosity <Trace|Debug|")

    def test_multi_valued_placeholder(self) -> None:
        assert option_label(SEARCH_TERMS_OPTION) == "--search-terms <search-terms>..."

    def test_argument_label(self) -> None:
        assert option_label(QUOTE_ARGUMENT) == "<quote>"

    def test_default_and_required_notes(self) -> None:
        assert option_description(DELAY_OPTION).endswith("[default: 0]")
        assert option_description(VERBOSITY_OPTION).endswith("[default: Error]")
        assert option_description(SEARCH_TERMS_OPTION).endswith("(REQUIRED)")


class TestSections:
    def test_usage_for_add(self) -> None:
        assert usage_line(_path("quotes", "add")) == (
            "quote-keeper quotes add <quote> <byline> [options]"
        )

    def test_read_lists_inherited_globals(self) -> None:
        sections = dict(help_sections(_path("quotes", "read")))
        labels = [label for label, _ in sections["Options"]]
        assert labels[0].startswith("--file")
        assert labels[1].startswith("--verbosity")
        assert "--delay <delay>" in labels

    def test_commands_show_aliases(self) -> None:
        sections = dict(help_sections(_path("quotes")))
        assert ("add, insert", "Add an entry to the file.") in sections["Commands"]

    def test_version_row_only_at_root(self) -> None:
        root_labels = [label for label, _ in dict(help_sections(_path()))["Options"]]
        read_labels = [label for label, _ in dict(help_sections(_path("quotes", "read")))["Options"]]
        assert "-V, --version" in root_labels
        assert "-V, --version" not in read_labels


class TestRender:
    def test_rich_render(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_help(_path("quotes", "add"))
        err = capsys.readouterr().err
        assert "Sample app for quote files" in err
        assert "Add an entry to the file." in err
        assert "<quote>" in err

    def test_plain_render_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich.panel", None)
        render_help(_path("quotes", "delete"))
        err = capsys.readouterr().err
        assert "Options:" in err
        assert "--search-terms <search-terms>..." in err
