"""Help output for any node of the command tree.

The text content is assembled by pure helpers; :func:`render_help`
draws it with Rich tables and falls back to plain stderr text when
Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from quote_keeper.cli.console import console
from quote_keeper.core.models import CommandNode, DefaultKind, Definition, ValueType
from quote_keeper.core.parser import reachable_definitions

HELP_ROW = ("-?, -h, --help", "Show help and usage information.")
VERSION_ROW = ("-V, --version", "Show version information.")

Section = tuple[str, list[tuple[str, str]]]


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

def _placeholder(definition: Definition) -> str:
    if definition.value_type is ValueType.BOOL:
        return ""
    if definition.value_type is ValueType.ENUM:
        return f" <{'|'.join(definition.choices)}>"
    bare = definition.name.lstrip("-")
    suffix = "..." if definition.allows_multiple else ""
    return f" <{bare}>{suffix}"


def option_label(definition: Definition) -> str:
    """First help column for *definition*."""
    if definition.help_label:
        return definition.help_label
    if not definition.is_option:
        return f"<{definition.name}>"
    return f"{definition.name}{_placeholder(definition)}"


def option_description(definition: Definition) -> str:
    """Second help column, with a ``[default: ...]`` or ``(REQUIRED)`` note."""
    text = definition.description
    if definition.required:
        return f"{text} (REQUIRED)".strip()
    if definition.default.kind is DefaultKind.NONE:
        return text
    default = definition.default.produce()
    shown = getattr(default, "value", default)
    return f"{text} [default: {shown}]".strip()


def usage_line(path: Sequence[CommandNode]) -> str:
    command = path[-1]
    parts = [node.name for node in path]
    parts.extend(f"<{argument.name}>" for argument in command.arguments)
    if reachable_definitions(path):
        parts.append("[options]")
    if command.children:
        parts.append("[command]")
    return " ".join(parts)


def help_sections(path: Sequence[CommandNode]) -> list[Section]:
    """Ordered (title, rows) pairs describing the command at *path*."""
    command = path[-1]
    sections: list[Section] = [("Usage", [(usage_line(path), "")])]

    if command.arguments:
        sections.append(
            (
                "Arguments",
                [(option_label(d), option_description(d)) for d in command.arguments],
            )
        )

    option_rows = [
        (option_label(d), option_description(d))
        for d in reachable_definitions(path)
        if d.is_option
    ]
    if len(path) == 1:
        option_rows.append(VERSION_ROW)
    option_rows.append(HELP_ROW)
    sections.append(("Options", option_rows))

    if command.children:
        rows = []
        for child in command.children.values():
            names = ", ".join([child.name, *sorted(child.aliases)])
            rows.append((names, child.description))
        sections.append(("Commands", rows))
    return sections


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_help(title: str, subtitle: str, sections: list[Section]) -> None:
    print(f"\n{title}", file=sys.stderr)
    print("=" * len(title), file=sys.stderr)
    if subtitle:
        print(f"\n{subtitle}", file=sys.stderr)
    for heading, rows in sections:
        print(f"\n{heading}:", file=sys.stderr)
        width = max(len(label) for label, _ in rows)
        for label, text in rows:
            print(f"  {label:<{width}}  {text}".rstrip(), file=sys.stderr)
    print(file=sys.stderr)


def render_help(path: Sequence[CommandNode]) -> None:
    """Render help for the command at the end of *path*."""
    root, command = path[0], path[-1]
    subtitle = command.description if len(path) > 1 else ""
    sections = help_sections(path)

    try:
        from rich.panel import Panel
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_help(root.description, subtitle, sections)
        return

    console.print()
    console.print(Panel.fit(f"[bold]{root.description}[/bold]", border_style="cyan"))
    if subtitle:
        console.print(f"\n{subtitle}")
    for heading, rows in sections:
        table = Table(
            title=f"{heading}:",
            title_justify="left",
            title_style="bold cyan",
            show_header=False,
            box=None,
            padding=(0, 2),
        )
        table.add_column(style="bold", no_wrap=True)
        table.add_column()
        for label, text in rows:
            table.add_row(Text(label), Text(text))
        console.print()
        console.print(table)
    console.print()
