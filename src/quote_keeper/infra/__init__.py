"""Infrastructure layer — filesystem access, tracing and logging setup.

Rules
-----
* No imports from ``cli``.
* No user-facing output beyond log records (no ``print()``).
* Every ``OSError`` is re-raised as
  :class:`~quote_keeper.exceptions.OperationError`.
"""

from quote_keeper.infra.logging import configure_logging
from quote_keeper.infra.quote_file import append_text, read_lines, write_lines
from quote_keeper.infra.tracing import Tracer, build_tracer

__all__: list[str] = [
    "Tracer",
    "append_text",
    "build_tracer",
    "configure_logging",
    "read_lines",
    "write_lines",
]
