"""Infrastructure layer — files, entry points and logging.

Every raw ``OSError`` or import failure is caught here and re-raised as
a :class:`~readahead.exceptions.ReadaheadError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from readahead.infra.engine_loader import available_engines, load_engine
from readahead.infra.input_list import InputListGuard
from readahead.infra.logging_setup import LogTarget, open_log, parse_log_environment, set_log_target

__all__: list[str] = [
    "InputListGuard",
    "LogTarget",
    "available_engines",
    "load_engine",
    "open_log",
    "parse_log_environment",
    "set_log_target",
]
