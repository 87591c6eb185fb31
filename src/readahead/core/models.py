"""Domain models for readahead.

All models are **frozen** dataclasses or enums: immutable value objects
with no behaviour beyond parsing and data access.  The configuration is
built once after option parsing and then passed explicitly to the
dispatcher; there is no process-global configuration.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import TextIO

from readahead.exceptions import UnknownVerbError


DEFAULT_FILES_MAX: int = 16 * 1024
"""Default upper bound on the number of files collected."""

DEFAULT_FILE_SIZE_MAX: int = 10 * 1024 * 1024
"""Default upper bound, in bytes, on a single file considered for read-ahead."""

DEFAULT_TIMEOUT: timedelta = timedelta(minutes=2)
"""Default upper bound on the time spent collecting."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ReadaheadConfig:
    """Validated global settings shared by all verbs."""

    files_max: int = DEFAULT_FILES_MAX
    """Maximum number of files the collect engine may read ahead."""

    file_size_max: int = DEFAULT_FILE_SIZE_MAX
    """Maximum size in bytes of an individual file."""

    timeout: timedelta = DEFAULT_TIMEOUT
    """Maximum time the collect engine may spend."""

    input_list: TextIO | None = None
    """Open ``--filelist`` handle, or ``None``.

    The handle is owned by :class:`~readahead.infra.input_list.InputListGuard`;
    the configuration only borrows it and must never close it.
    """


# ---------------------------------------------------------------------------
# Verbs
# ---------------------------------------------------------------------------

class Verb(enum.Enum):
    """Operation mode selected by the first positional argument."""

    COLLECT = "collect"
    REPLAY = "replay"
    ANALYZE = "analyze"

    @classmethod
    def parse(cls, token: str) -> Verb:
        """Return the verb named by *token* or raise :class:`UnknownVerbError`.

        Matching is exact and case-sensitive.
        """
        try:
            return cls(token)
        except ValueError:
            raise UnknownVerbError(token) from None


@dataclass(frozen=True, slots=True)
class VerbRequest:
    """A verb plus its optional target directory or pack file."""

    verb: Verb
    target: str | None = None
