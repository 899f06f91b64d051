"""Dispatcher — invoke the handler bound to a resolved command.

Handlers receive a typed parameter struct built from the
:class:`~quote_keeper.core.models.ParseResult` plus the
:class:`~quote_keeper.core.models.Services` bundle.  Coroutine handlers
are driven to completion with :func:`asyncio.run`, which keeps the
pacing delays of ``read`` cooperative and cancellable.

Handlers report success as a ``bool``; an :class:`OperationError` that
still escapes a handler is caught here and reported as a failure.
"""

from __future__ import annotations

import asyncio
import inspect
import logging

from quote_keeper.core.models import ParseResult, Services
from quote_keeper.exceptions import DefinitionError, OperationError, ValidationError

logger = logging.getLogger(__name__)


def dispatch(result: ParseResult, services: Services) -> bool:
    """Run the handler of ``result.command``.

    Returns
    -------
    bool
        ``True`` when the operation completed, ``False`` when it failed
        and the failure was reported.

    Raises
    ------
    ValidationError
        When *result* carries parse errors; no handler runs.
    DefinitionError
        When the resolved command has no handler bound.
    """
    if result.errors:
        raise ValidationError(result.errors)

    binding = result.command.handler
    if binding is None:
        raise DefinitionError(f"Command {result.command.name!r} has no handler.")

    params = binding.params_type.from_result(result)
    logger.debug("Dispatching %s with %r", " ".join(result.command_path), params)

    try:
        outcome = binding.handler(params, services)
        if inspect.iscoroutine(outcome):
            outcome = asyncio.run(outcome)
    except OperationError as exc:
        logger.error("%s failed: %s", result.command.name, exc)
        return False

    return outcome is not False
