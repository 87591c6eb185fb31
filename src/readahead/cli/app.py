"""CLI application entry point and verb routing for readahead.

This module is the **sole error boundary** for the entire application.
It catches :class:`~readahead.exceptions.ReadaheadError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
user-friendly message and returns well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing is delegated to
  :mod:`readahead.cli.options`, routing to
  :class:`~readahead.core.dispatch_service.DispatchService`.
* The ``--filelist`` handle lives inside one ``with InputListGuard()``
  block covering parsing and dispatch; nothing returns or raises past
  that block with the handle still open.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from readahead.cli import exit_codes
from readahead.cli.console import console
from readahead.cli.options import parse_argv
from readahead.core.dispatch_service import DispatchService
from readahead.core.protocols import ReadaheadEngine
from readahead.exceptions import ReadaheadError
from readahead.infra.input_list import InputListGuard
from readahead.infra.logging_setup import LogTarget, open_log, parse_log_environment, set_log_target


def main(
    argv: Sequence[str] | None = None,
    *,
    engine: ReadaheadEngine | None = None,
) -> int:
    """Run the readahead CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    engine:
        Engine to dispatch to.  When ``None`` the installed engine is
        discovered, and only after the arguments were accepted.

    Returns
    -------
    int
        OS process exit code: ``SUCCESS`` for help, otherwise the
        engine's status.

    Raises
    ------
    ReadaheadError
        Any parse, resource, verb or engine-loading failure.  The
        input-list handle is already closed when it propagates.
    """
    if argv is None:
        argv = sys.argv[1:]

    with InputListGuard() as guard:
        parsed = parse_argv(argv, guard)
        if parsed is None:
            return exit_codes.SUCCESS

        request = parsed.verb_request()

        if engine is None:
            from readahead.infra.engine_loader import load_engine

            engine = load_engine()

        return DispatchService(engine).dispatch(request, parsed.config)


def _process_exit_status(status: int) -> int:
    """Fold an engine status into ``0..255`` without turning failure into success.

    The OS keeps only the low 8 bits, so 256 would otherwise exit 0.
    """
    if 0 <= status <= 255:
        return status
    return exit_codes.GENERAL_ERROR


def _setup_process() -> None:
    """Process-level start-up shared by the console script and ``python -m``."""
    set_log_target(LogTarget.SAFE)
    parse_log_environment()
    open_log()
    os.umask(0o022)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        _setup_process()
        code = main()
        sys.exit(_process_exit_status(code))
    except ReadaheadError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", markup="\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
            markup=(
                "[bold red]Unexpected error.[/bold red] "
                "Please report this issue.\n"
                f"  {type(exc).__name__}: {exc}"
            ),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
