"""Logging helpers using Rich.

``--verbosity`` is translated to a stdlib logging level here.  A custom
``TRACE`` level sits below ``DEBUG`` and carries exported spans.
"""

from __future__ import annotations

import logging

from quote_keeper.core.models import LogLevel

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.NONE: logging.CRITICAL + 10,
}

ROOT_LOGGER = "quote_keeper"


def to_logging_level(verbosity: LogLevel) -> int:
    return _LEVELS[verbosity]


def _build_handler() -> logging.Handler:
    """Rich handler on stderr, or a plain stream handler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )


def configure_logging(verbosity: LogLevel) -> logging.Logger:
    """Configure the package logger for one invocation and return it.

    Calling this again replaces the previous handler, so repeated
    ``main()`` calls in one process do not stack handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    handler = _build_handler()
    handler.setLevel(to_logging_level(verbosity))
    logger.addHandler(handler)
    logger.setLevel(to_logging_level(verbosity))
    logger.propagate = False
    return logger
