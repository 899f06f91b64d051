"""Parser/Validator — resolve raw tokens against a command tree.

The parser never raises on bad input.  It walks the whole token
sequence once, accumulating every problem it can find, and hands back a
:class:`~quote_keeper.core.models.ParseResult` whose ``errors`` tuple is
empty only when the invocation is executable.

Token grammar
-------------
* ``--name value``, ``--name=value`` and ``--name:value``.
* Bool flags take no value; ``true``/``false`` may follow explicitly.
* Multi-valued options swallow tokens until the next option-like token.
* ``--`` ends option processing.
* ``-h``, ``--help`` and ``-?`` request help for the resolved command.
* A bare token selects a child command (by name or alias) as long as no
  positional argument has been bound yet; otherwise it is positional.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Sequence

from quote_keeper.core.models import (
    CommandNode,
    Definition,
    ParseError,
    ParseResult,
    ValueType,
)

logger = logging.getLogger(__name__)

HELP_TOKENS: frozenset[str] = frozenset({"-h", "--help", "-?"})
END_OF_OPTIONS = "--"
MISSING_COMMAND = "Required command was not provided."

_BOOL_LITERALS = frozenset({"true", "false", "True", "False"})


def unrecognized(token: str) -> str:
    return f"Unrecognized command or argument '{token}'."


def _looks_like_option(token: str) -> bool:
    if len(token) < 2 or not token.startswith("-"):
        return False
    try:
        float(token)
    except ValueError:
        return True
    return False


def _split_inline(token: str) -> tuple[str, str | None]:
    """Split ``--name=value`` / ``--name:value`` into name and value."""
    positions = [i for i in (token.find("="), token.find(":")) if i > 0]
    if not positions:
        return token, None
    cut = min(positions)
    return token[:cut], token[cut + 1:]


def visible_options(path: Sequence[CommandNode]) -> dict[str, Definition]:
    """Options usable at the end of *path*: inherited globals plus locals."""
    options: dict[str, Definition] = {}
    for node in path:
        for definition in node.global_definitions:
            if definition.is_option:
                options[definition.name] = definition
    for definition in path[-1].options:
        options[definition.name] = definition
    return options


def reachable_definitions(path: Sequence[CommandNode]) -> tuple[Definition, ...]:
    """Every definition resolved for the command at the end of *path*."""
    inherited = [d for node in path for d in node.global_definitions]
    return (*inherited, *path[-1].definitions)


class _Scan:
    """Mutable accumulator for a single left-to-right pass."""

    def __init__(self, root: CommandNode) -> None:
        self.path: list[CommandNode] = [root]
        self.option_tokens: dict[str, list[str]] = {}
        self.option_spelling: dict[str, str] = {}
        self.valueless: set[str] = set()
        self.positionals: list[str] = []
        self.errors: list[ParseError] = []
        self.help_requested = False

    def run(self, tokens: Sequence[str]) -> None:
        remaining = list(tokens)
        index = 0
        options_ended = False
        while index < len(remaining):
            token = remaining[index]
            index += 1

            if options_ended:
                self.positionals.append(token)
            elif token == END_OF_OPTIONS:
                options_ended = True
            elif token in HELP_TOKENS:
                self.help_requested = True
            elif _looks_like_option(token):
                index = self._take_option(token, remaining, index)
            else:
                self._take_word(token)

    def _take_word(self, token: str) -> None:
        if not self.positionals:
            child = self.path[-1].find_child(token)
            if child is not None:
                self.path.append(child)
                return
        self.positionals.append(token)

    def _take_option(self, token: str, tokens: Sequence[str], index: int) -> int:
        name, inline = _split_inline(token)
        definition = visible_options(self.path).get(name)
        if definition is None:
            self.errors.append(ParseError(unrecognized(token)))
            return index

        collected = self.option_tokens.setdefault(definition.name, [])
        self.option_spelling.setdefault(definition.name, token)
        if inline is not None:
            collected.append(inline)
            return index

        if definition.value_type is ValueType.BOOL:
            if index < len(tokens) and tokens[index] in _BOOL_LITERALS:
                collected.append(tokens[index])
                return index + 1
            collected.append("true")
            return index

        start = index
        if definition.allows_multiple:
            while index < len(tokens) and not _is_boundary(tokens[index]):
                collected.append(tokens[index])
                index += 1
        elif index < len(tokens) and not _is_boundary(tokens[index]):
            collected.append(tokens[index])
            index += 1

        if index == start:
            self.valueless.add(definition.name)
            self.errors.append(
                ParseError(
                    f"Required argument missing for option: '{definition.name}'.",
                    definition.name,
                )
            )
        return index


def _is_boundary(token: str) -> bool:
    return token == END_OF_OPTIONS or token in HELP_TOKENS or _looks_like_option(token)


class Parser:
    """Resolves token sequences against an immutable command tree.

    Parameters
    ----------
    root:
        Root of the tree, typically the value returned by ``build_tree()``.
    """

    def __init__(self, root: CommandNode) -> None:
        self._root: CommandNode = root

    def parse(self, tokens: Sequence[str] | str) -> ParseResult:
        """Parse *tokens* (or a shell-style string) into a ``ParseResult``."""
        if isinstance(tokens, str):
            tokens = shlex.split(tokens)

        scan = _Scan(self._root)
        scan.run(tokens)

        path = tuple(scan.path)
        command = path[-1]
        errors = list(scan.errors)
        if command.handler is None:
            errors.append(ParseError(MISSING_COMMAND))

        reachable = reachable_definitions(path)
        reachable_names = {d.name for d in reachable}
        for name, spelling in scan.option_spelling.items():
            if name not in reachable_names:
                errors.append(ParseError(unrecognized(spelling), name))

        argument_tokens = self._bind_positionals(command, scan.positionals, errors)

        values: dict[str, object] = {}
        for definition in reachable:
            if definition.name in scan.valueless:
                continue
            if definition.is_option:
                tokens_for = scan.option_tokens.get(definition.name, [])
            elif definition.name in argument_tokens:
                tokens_for = argument_tokens[definition.name]
            elif definition.required:
                errors.append(
                    ParseError(
                        f"Required argument '{definition.name}' missing for "
                        f"command: '{command.name}'.",
                        definition.name,
                    )
                )
                continue
            else:
                tokens_for = []

            outcome = definition.resolve(tokens_for)
            if outcome.ok:
                values[definition.name] = outcome.value
            else:
                errors.append(ParseError(outcome.error or "", definition.name))

        logger.debug(
            "Parsed %r -> %s (%d error(s))",
            list(tokens),
            " ".join(node.name for node in path),
            len(errors),
        )
        return ParseResult(
            command=command,
            path=path,
            values=values,
            errors=tuple(errors),
            help_requested=scan.help_requested,
        )

    @staticmethod
    def _bind_positionals(
        command: CommandNode,
        positionals: Sequence[str],
        errors: list[ParseError],
    ) -> dict[str, list[str]]:
        """Match positional tokens to arguments in declaration order."""
        arguments = command.arguments
        bound: dict[str, list[str]] = {}
        for index, token in enumerate(positionals):
            if index < len(arguments):
                bound[arguments[index].name] = [token]
            else:
                errors.append(ParseError(unrecognized(token)))
        return bound
