"""Custom exception hierarchy for readahead.

All exceptions that cross layer boundaries must inherit from
:class:`ReadaheadError`.  Raw exceptions raised by an engine must never
propagate beyond the dispatcher; they are re-raised as
:class:`DispatchError`.

Hierarchy
---------
ReadaheadError
├── UsageError
│   └── UnknownVerbError
├── ValidationError
├── ResourceError
│   └── FileListError
├── DispatchError
├── EngineUnavailableError
└── MissingDependencyError

None of these subclass :class:`ValueError` or :class:`TypeError`:
``argparse`` converts those into its own usage errors, and validation
failures must reach the CLI error boundary intact.
"""

from __future__ import annotations

HELP_HINT = "Run 'readahead --help' for usage."


class ReadaheadError(Exception):
    """Base exception for all readahead errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(ReadaheadError):
    """Raised for unknown options, bad positional counts, or repeated ``--filelist``."""


class UnknownVerbError(UsageError):
    """Raised when the verb is not one of ``collect``, ``replay``, ``analyze``."""

    def __init__(self, verb: str) -> None:
        super().__init__(f"Unknown verb {verb}.", hint=HELP_HINT)
        self.verb: str = verb


class ValidationError(ReadaheadError):
    """Raised when a numeric or duration option value is malformed or not positive."""


# --- Resources -------------------------------------------------------------

class ResourceError(ReadaheadError):
    """Raised when a resource named on the command line cannot be acquired."""


class FileListError(ResourceError):
    """Raised when the ``--filelist`` file cannot be opened for reading."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read list {path} of collect-file names: {reason}")
        self.path: str = path


# --- Engines ---------------------------------------------------------------

class DispatchError(ReadaheadError):
    """Raised when a read-ahead engine fails with an unexpected exception."""


class EngineUnavailableError(ReadaheadError):
    """Raised when no usable read-ahead engine is installed."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(ReadaheadError):
    """Raised when an optional third-party package is required but not installed."""
