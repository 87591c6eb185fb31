"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Engine statuses are passed through unchanged and are not listed here.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Help shown, or the verb completed without error."""

GENERAL_ERROR: int = 1
"""A known ReadaheadError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
