"""Domain models for quote-keeper.

The command surface is described by immutable values: a
:class:`Definition` per option or positional argument, a tree of
:class:`CommandNode` objects owning those definitions, and a
:class:`ParseResult` produced fresh for every invocation.  None of these
carry I/O and none are mutated after construction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from quote_keeper.exceptions import DefinitionError

if TYPE_CHECKING:
    from quote_keeper.core.protocols import CommandParams, OutputSink, Tracer


# ---------------------------------------------------------------------------
# Domain enumerations
# ---------------------------------------------------------------------------

class ConsoleColor(str, Enum):
    """The sixteen classic console colours, matched by display name."""

    BLACK = "Black"
    DARK_BLUE = "DarkBlue"
    DARK_GREEN = "DarkGreen"
    DARK_CYAN = "DarkCyan"
    DARK_RED = "DarkRed"
    DARK_MAGENTA = "DarkMagenta"
    DARK_YELLOW = "DarkYellow"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    BLUE = "Blue"
    GREEN = "Green"
    CYAN = "Cyan"
    RED = "Red"
    MAGENTA = "Magenta"
    YELLOW = "Yellow"
    WHITE = "White"


class LogLevel(str, Enum):
    """Verbosity levels accepted by ``--verbosity``, most verbose first."""

    TRACE = "Trace"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"
    NONE = "None"

    @property
    def rank(self) -> int:
        """Ordinal position; lower is more verbose."""
        return list(LogLevel).index(self)


class SpanStatus(Enum):
    UNSET = "unset"
    OK = "ok"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

class DefinitionKind(Enum):
    OPTION = "option"
    ARGUMENT = "argument"


class ValueType(Enum):
    """Tag selecting the validator applied to each raw token."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    ENUM = "enum"
    FILE = "file"


class DefaultKind(Enum):
    NONE = "none"
    STATIC = "static"
    COMPUTED = "computed"


@dataclass(frozen=True, slots=True)
class DefaultRule:
    """How a definition produces a value when no token was supplied."""

    kind: DefaultKind = DefaultKind.NONE
    value: Any = None
    factory: Callable[[], Any] | None = None

    @classmethod
    def none(cls) -> DefaultRule:
        return cls()

    @classmethod
    def static(cls, value: Any) -> DefaultRule:
        return cls(kind=DefaultKind.STATIC, value=value)

    @classmethod
    def computed(cls, factory: Callable[[], Any]) -> DefaultRule:
        return cls(kind=DefaultKind.COMPUTED, factory=factory)

    def produce(self) -> Any:
        """Return the default value; computed factories run lazily here."""
        if self.kind is DefaultKind.COMPUTED and self.factory is not None:
            return self.factory()
        return self.value


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one definition: a value or an error message."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def succeeded(cls, value: Any) -> Resolution:
        return cls(value=value)

    @classmethod
    def failed(cls, message: str) -> Resolution:
        return cls(error=message)


@dataclass(frozen=True, slots=True)
class Definition:
    """Declarative spec for a single option or positional argument.

    Options are named with their leading dashes (``--file``); arguments
    use a bare name (``quote``).  The same instance may be shared by
    several command nodes.
    """

    name: str
    kind: DefinitionKind
    description: str = ""
    value_type: ValueType = ValueType.STRING
    required: bool = False
    allows_multiple: bool = False
    default: DefaultRule = field(default_factory=DefaultRule.none)
    enum_type: type[Enum] | None = None
    help_label: str | None = None
    """Replacement for the first help column, when the default is unhelpful."""

    def __post_init__(self) -> None:
        if self.kind is DefinitionKind.OPTION and not self.name.startswith("-"):
            raise DefinitionError(f"Option name must start with '-': {self.name!r}")
        if self.kind is DefinitionKind.ARGUMENT and self.name.startswith("-"):
            raise DefinitionError(f"Argument name must not start with '-': {self.name!r}")
        if self.value_type is ValueType.ENUM and self.enum_type is None:
            raise DefinitionError(f"Enum-typed definition {self.name!r} needs an enum_type.")

    @property
    def is_option(self) -> bool:
        return self.kind is DefinitionKind.OPTION

    @property
    def choices(self) -> tuple[str, ...]:
        """Allowed raw tokens for enum-typed definitions, else empty."""
        if self.enum_type is None:
            return ()
        return tuple(str(member.value) for member in self.enum_type)

    def resolve(self, tokens: Sequence[str]) -> Resolution:
        """Turn the raw tokens collected for this definition into a value."""
        from quote_keeper.core.validators import resolve

        return resolve(self, tokens)


def option(name: str, description: str = "", **kwargs: Any) -> Definition:
    return Definition(name=name, kind=DefinitionKind.OPTION, description=description, **kwargs)


def argument(name: str, description: str = "", **kwargs: Any) -> Definition:
    kwargs.setdefault("required", True)
    return Definition(name=name, kind=DefinitionKind.ARGUMENT, description=description, **kwargs)


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Binding:
    """Pairs a handler with the parameter struct it is called with.

    ``params_type.from_result(result)`` builds the struct; the handler is
    then called as ``handler(params, services)`` and may be a coroutine
    function.
    """

    params_type: type[CommandParams]
    handler: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class CommandNode:
    """One named command in the tree.

    ``global_definitions`` are inherited by every descendant;
    ``definitions`` apply to this node only.
    """

    name: str
    description: str = ""
    aliases: frozenset[str] = frozenset()
    definitions: tuple[Definition, ...] = ()
    global_definitions: tuple[Definition, ...] = ()
    children: Mapping[str, CommandNode] = field(default_factory=dict)
    handler: Binding | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", frozenset(self.aliases))
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))
        self._check_children()
        self._check_arguments()

    def _check_children(self) -> None:
        seen: set[str] = set()
        for child in self.children.values():
            for token in child.tokens:
                if token in seen:
                    raise DefinitionError(
                        f"Command {self.name!r} has more than one child matching {token!r}."
                    )
                seen.add(token)

    def _check_arguments(self) -> None:
        optional_seen = False
        for definition in self.arguments:
            if not definition.required:
                optional_seen = True
            elif optional_seen:
                raise DefinitionError(
                    f"Required argument {definition.name!r} of command {self.name!r} "
                    "follows an optional one."
                )
        names = [d.name for d in (*self.global_definitions, *self.definitions)]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            raise DefinitionError(
                f"Command {self.name!r} declares {sorted(duplicates)} more than once."
            )

    @property
    def tokens(self) -> frozenset[str]:
        """Every token that selects this node: its name plus aliases."""
        return self.aliases | {self.name}

    @property
    def options(self) -> tuple[Definition, ...]:
        return tuple(d for d in self.definitions if d.is_option)

    @property
    def arguments(self) -> tuple[Definition, ...]:
        return tuple(d for d in self.definitions if not d.is_option)

    def find_child(self, token: str) -> CommandNode | None:
        """Return the child whose name or alias equals *token*."""
        for child in self.children.values():
            if token in child.tokens:
                return child
        return None


def command(
    name: str,
    description: str = "",
    *,
    aliases: Iterable[str] = (),
    definitions: Iterable[Definition] = (),
    global_definitions: Iterable[Definition] = (),
    children: Iterable[CommandNode] = (),
    handler: Binding | None = None,
) -> CommandNode:
    """Convenience constructor taking children as a sequence."""
    child_map: dict[str, CommandNode] = {}
    for child in children:
        if child.name in child_map:
            raise DefinitionError(f"Command {name!r} declares {child.name!r} twice.")
        child_map[child.name] = child
    return CommandNode(
        name=name,
        description=description,
        aliases=frozenset(aliases),
        definitions=tuple(definitions),
        global_definitions=tuple(global_definitions),
        children=child_map,
        handler=handler,
    )


# ---------------------------------------------------------------------------
# Parse outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseError:
    """A single validation failure, optionally tied to a definition name."""

    message: str
    definition: str | None = None


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of resolving raw tokens against the command tree."""

    command: CommandNode
    path: tuple[CommandNode, ...]
    values: Mapping[str, Any]
    errors: tuple[ParseError, ...] = ()
    help_requested: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def is_executable(self) -> bool:
        return not self.errors

    @property
    def command_path(self) -> tuple[str, ...]:
        return tuple(node.name for node in self.path)

    def value_for(self, definition: Definition) -> Any:
        """Return the bound value for *definition* (``KeyError`` if unbound)."""
        return self.values[definition.name]


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Services:
    """Process-wide collaborators injected alongside parsed parameters."""

    tracer: Tracer
    output: OutputSink
