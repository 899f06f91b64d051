"""Pure per-token validators, selected by :class:`ValueType`.

Each validator maps one raw token to a :class:`Resolution`.  The
:func:`resolve` function composes them with default-value and
multiplicity rules; it performs no I/O apart from the existence probe
that file-reference definitions require.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from quote_keeper.core.models import Definition, Resolution, ValueType

FILE_DOES_NOT_EXIST = "File does not exist"

_TRUE_TOKENS = frozenset({"true", "True"})
_FALSE_TOKENS = frozenset({"false", "False"})


def _label(definition: Definition) -> str:
    kind = "option" if definition.is_option else "argument"
    return f"{kind} '{definition.name}'"


# ---------------------------------------------------------------------------
# Token validators
# ---------------------------------------------------------------------------

def validate_string(token: str, _definition: Definition) -> Resolution:
    return Resolution.succeeded(token)


def validate_int(token: str, definition: Definition) -> Resolution:
    try:
        return Resolution.succeeded(int(token))
    except ValueError:
        return Resolution.failed(
            f"Cannot parse argument '{token}' for {_label(definition)} "
            "as expected type 'int'."
        )


def validate_bool(token: str, definition: Definition) -> Resolution:
    if token in _TRUE_TOKENS:
        return Resolution.succeeded(True)
    if token in _FALSE_TOKENS:
        return Resolution.succeeded(False)
    return Resolution.failed(
        f"Cannot parse argument '{token}' for {_label(definition)} "
        "as expected type 'bool'."
    )


def validate_enum_member(token: str, definition: Definition) -> Resolution:
    """Match *token* case-sensitively against the enum's display values."""
    for member in definition.enum_type or ():
        if member.value == token:
            return Resolution.succeeded(member)
    allowed = ", ".join(f"'{choice}'" for choice in definition.choices)
    return Resolution.failed(f"Argument '{token}' not recognized. Must be one of: {allowed}")


def validate_file_exists(token: str, _definition: Definition) -> Resolution:
    path = Path(token)
    if not path.is_file():
        return Resolution.failed(FILE_DOES_NOT_EXIST)
    return Resolution.succeeded(path)


VALIDATORS: dict[ValueType, Callable[[str, Definition], Resolution]] = {
    ValueType.STRING: validate_string,
    ValueType.INT: validate_int,
    ValueType.BOOL: validate_bool,
    ValueType.ENUM: validate_enum_member,
    ValueType.FILE: validate_file_exists,
}


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def resolve(definition: Definition, tokens: Sequence[str]) -> Resolution:
    """Resolve *tokens* for *definition*.

    * No tokens: the default when optional, an error when required.
    * Single-valued definitions reject more than one token.
    * Multi-valued definitions yield a tuple in encounter order.
    * The first token that fails validation short-circuits the rest.
    """
    if not tokens:
        if definition.required:
            if definition.is_option:
                return Resolution.failed(f"Option '{definition.name}' is required.")
            return Resolution.failed(f"Required argument '{definition.name}' missing.")
        return Resolution.succeeded(definition.default.produce())

    if not definition.allows_multiple and len(tokens) > 1:
        label = _label(definition)
        return Resolution.failed(
            f"{label[0].upper()}{label[1:]} expects a single argument "
            f"but {len(tokens)} were provided."
        )

    validator = VALIDATORS[definition.value_type]
    values = []
    for token in tokens:
        outcome = validator(token, definition)
        if not outcome.ok:
            return outcome
        values.append(outcome.value)

    if definition.allows_multiple:
        return Resolution.succeeded(tuple(values))
    return Resolution.succeeded(values[0])
