"""Infrastructure: process-wide logging configuration.

Start-up runs three steps, in order::

    set_log_target(LogTarget.SAFE)
    parse_log_environment()
    open_log()

The first picks a default destination, the second lets the environment
override target, level and location display, and the third installs
the single handler on the ``readahead`` logger.

Environment
-----------
``READAHEAD_LOG_TARGET``
    ``console``, ``syslog``, ``null`` or ``safe``.
``READAHEAD_LOG_LEVEL``
    A syslog-style name (``debug`` … ``emerg``) or a number 0-7.
``READAHEAD_LOG_LOCATION``
    Boolean; when true each record carries ``file:line``.

Invalid values are reported and ignored; they never abort start-up.
"""

from __future__ import annotations

import enum
import logging
import logging.handlers
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

LOGGER_NAME: str = "readahead"
SYSLOG_SOCKET: str = "/dev/log"

ENV_TARGET: str = "READAHEAD_LOG_TARGET"
ENV_LEVEL: str = "READAHEAD_LOG_LEVEL"
ENV_LOCATION: str = "READAHEAD_LOG_LOCATION"


class LogTarget(enum.Enum):
    """Where log records go."""

    CONSOLE = "console"
    SYSLOG = "syslog"
    NULL = "null"
    SAFE = "safe"
    """Syslog when its socket exists, otherwise the console."""


# syslog priorities, folded onto the stdlib levels.
_LEVEL_NAMES: dict[str, int] = {
    "emerg": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "crit": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "err": logging.ERROR,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "notice": logging.INFO,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_SYSLOG_NUMERIC: tuple[int, ...] = (
    logging.CRITICAL,  # 0 emerg
    logging.CRITICAL,  # 1 alert
    logging.CRITICAL,  # 2 crit
    logging.ERROR,     # 3 err
    logging.WARNING,   # 4 warning
    logging.INFO,      # 5 notice
    logging.INFO,      # 6 info
    logging.DEBUG,     # 7 debug
)

_TRUE = frozenset({"1", "yes", "y", "true", "t", "on"})
_FALSE = frozenset({"0", "no", "n", "false", "f", "off"})


@dataclass(slots=True)
class LogSettings:
    """Mutable logging state collected before :func:`open_log` runs."""

    target: LogTarget = LogTarget.SAFE
    level: int = logging.INFO
    show_location: bool = False


_settings = LogSettings()


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------

def parse_log_level(text: str) -> int:
    """Map a syslog-style level name or number to a stdlib level.

    Raises
    ------
    ValueError
        For unknown names or numbers outside 0-7.
    """
    value = text.strip().lower()
    if value.isdigit():
        index = int(value)
        if index < len(_SYSLOG_NUMERIC):
            return _SYSLOG_NUMERIC[index]
        raise ValueError(f"log level out of range: {text}")
    try:
        return _LEVEL_NAMES[value]
    except KeyError:
        raise ValueError(f"unknown log level: {text}") from None


def parse_boolean(text: str) -> bool:
    """Parse the usual yes/no spellings."""
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text}")


# ---------------------------------------------------------------------------
# Start-up steps
# ---------------------------------------------------------------------------

def set_log_target(target: LogTarget) -> None:
    """Select the default destination for log records."""
    _settings.target = target


def parse_log_environment(environ: Mapping[str, str] | None = None) -> None:
    """Apply ``READAHEAD_LOG_*`` overrides from *environ* (default ``os.environ``)."""
    env = os.environ if environ is None else environ
    logger = logging.getLogger(__name__)

    raw = env.get(ENV_TARGET)
    if raw:
        try:
            _settings.target = LogTarget(raw.strip().lower())
        except ValueError:
            logger.warning("Failed to parse log target %s. Ignoring.", raw)

    raw = env.get(ENV_LEVEL)
    if raw:
        try:
            _settings.level = parse_log_level(raw)
        except ValueError:
            logger.warning("Failed to parse log level %s. Ignoring.", raw)

    raw = env.get(ENV_LOCATION)
    if raw:
        try:
            _settings.show_location = parse_boolean(raw)
        except ValueError:
            logger.warning("Failed to parse log location setting %s. Ignoring.", raw)


def _resolve_target(target: LogTarget) -> LogTarget:
    if target is LogTarget.SAFE:
        return LogTarget.SYSLOG if os.path.exists(SYSLOG_SOCKET) else LogTarget.CONSOLE
    return target


def _build_handler(target: LogTarget) -> logging.Handler:
    if target is LogTarget.NULL:
        return logging.NullHandler()
    if target is LogTarget.SYSLOG:
        try:
            return logging.handlers.SysLogHandler(address=SYSLOG_SOCKET)
        except OSError:
            # Socket vanished or refused; keep the messages.
            return logging.StreamHandler(sys.stderr)
    return logging.StreamHandler(sys.stderr)


def open_log() -> logging.Logger:
    """Install the handler for the selected target and return the package logger.

    Repeated calls replace the previously installed handler rather than
    stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    target = _resolve_target(_settings.target)
    handler = _build_handler(target)

    if target is LogTarget.SYSLOG and isinstance(handler, logging.handlers.SysLogHandler):
        fmt = "readahead[%(process)d]: %(message)s"
    else:
        fmt = "%(message)s"
    if _settings.show_location:
        fmt = "(%(filename)s:%(lineno)d) " + fmt
    handler.setFormatter(logging.Formatter(fmt))

    logger.addHandler(handler)
    logger.setLevel(_settings.level)
    logger.propagate = False
    return logger
