"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap paths
(``--help``, ``--version``, early boot without site-packages) keep
working when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from readahead.exceptions import MissingDependencyError, ReadaheadError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object, markup: str | None = None) -> None:
        """Render *markup* with Rich when available, else *objects* on plain stderr.

        *markup* is the Rich-styled variant of the message; the plain
        fallback prints *objects* so no markup tags leak into the output.
        """
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*objects, file=sys.stderr)
            return
        if markup is None:
            rich_console.print(*objects, markup=False)
        else:
            rich_console.print(markup)

    def error(self, exc: ReadaheadError) -> None:
        """Render a user-facing error with its optional hint."""
        self.print(f"Error: {exc}", markup=f"[bold red]Error:[/bold red] {_escape(str(exc))}")
        if exc.hint:
            self.print(f"Hint: {exc.hint}", markup=f"[yellow]Hint:[/yellow] {_escape(exc.hint)}")


def _escape(text: str) -> str:
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


console = _ConsoleProxy()
