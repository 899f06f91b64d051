"""Command tree for quote-keeper.

:func:`build_tree` is pure: every call returns a structurally identical
tree, so tests can parse synthetic input without touching process state.
"""

from __future__ import annotations

from quote_keeper.cli.definitions import (
    BYLINE_ARGUMENT,
    DELAY_OPTION,
    FOREGROUND_COLOR_OPTION,
    GLOBAL_DEFINITIONS,
    LIGHT_MODE_OPTION,
    QUOTE_ARGUMENT,
    SEARCH_TERMS_OPTION,
)
from quote_keeper.cli.operations import add_quote, delete_quotes, read_quotes
from quote_keeper.cli.params import AddParams, DeleteParams, ReadParams
from quote_keeper.core.models import Binding, CommandNode, command

PROG = "quote-keeper"
ROOT_DESCRIPTION = "Sample app for quote files"


def build_tree() -> CommandNode:
    """Construct the root command node and its descendants."""
    read = command(
        "read",
        "Read and display the file.",
        definitions=(DELAY_OPTION, FOREGROUND_COLOR_OPTION, LIGHT_MODE_OPTION),
        handler=Binding(ReadParams, read_quotes),
    )
    delete = command(
        "delete",
        "Delete lines from the file.",
        definitions=(SEARCH_TERMS_OPTION,),
        handler=Binding(DeleteParams, delete_quotes),
    )
    add = command(
        "add",
        "Add an entry to the file.",
        aliases=("insert",),
        definitions=(QUOTE_ARGUMENT, BYLINE_ARGUMENT),
        handler=Binding(AddParams, add_quote),
    )
    quotes = command(
        "quotes",
        "Work with a file that contains quotes.",
        children=(read, delete, add),
    )
    return command(
        PROG,
        ROOT_DESCRIPTION,
        global_definitions=GLOBAL_DEFINITIONS,
        children=(quotes,),
    )
