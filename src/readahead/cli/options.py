"""Command-line option parsing.

Turns an argument vector into a :class:`ParsedArguments` (validated
configuration plus the verb and optional target) or stops early:

* ``-h``/``--help`` and ``-V``/``--version`` print and return ``None``;
  anything after them is not looked at.
* Malformed or non-positive values raise
  :class:`~readahead.exceptions.ValidationError`.
* Unknown options and wrong positional counts raise
  :class:`~readahead.exceptions.UsageError`.  An unknown option fails
  where it stands, so ``--bogus -h`` is an error and ``-h --bogus`` is
  help.
* ``--filelist`` is opened through the caller's
  :class:`~readahead.infra.input_list.InputListGuard` the moment it is
  scanned, so a bad path fails before later options are examined.  The
  guard, not this module, closes it.

Options are processed strictly left to right; numeric options given more
than once keep the last value.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, NoReturn

from readahead.cli.help_text import PROG, render_help
from readahead.core.models import (
    DEFAULT_FILE_SIZE_MAX,
    DEFAULT_FILES_MAX,
    DEFAULT_TIMEOUT,
    ReadaheadConfig,
    Verb,
    VerbRequest,
)
from readahead.core.values import parse_file_size_max, parse_files_max, parse_timeout
from readahead.exceptions import HELP_HINT, UsageError
from readahead.infra.input_list import InputListGuard
from readahead.version import __version__


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Successful parse: configuration plus the remaining positionals."""

    config: ReadaheadConfig
    positionals: tuple[str, ...]
    """Verb name and, optionally, the target path."""

    def verb_request(self) -> VerbRequest:
        """Resolve the positionals into a :class:`VerbRequest`.

        Raises
        ------
        UnknownVerbError
            When the first positional is not a known verb.
        """
        verb = Verb.parse(self.positionals[0])
        target = self.positionals[1] if len(self.positionals) > 1 else None
        return VerbRequest(verb=verb, target=target)


# ---------------------------------------------------------------------------
# argparse plumbing
# ---------------------------------------------------------------------------

class _StopParsing(Exception):
    """Raised by terminal actions to unwind out of argparse."""

    def __init__(self, output: str) -> None:
        super().__init__(output)
        self.output = output


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}.", hint=HELP_HINT)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace,
                 values: Any, option_string: str | None = None) -> None:
        raise _StopParsing(render_help(parser.prog))


class _VersionAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace,
                 values: Any, option_string: str | None = None) -> None:
        raise _StopParsing(f"{parser.prog} {__version__}\n")


class _FileListAction(argparse.Action):
    """Open the list file through the guard as soon as the option is seen."""

    def __init__(self, option_strings: Sequence[str], dest: str, *,
                 guard: InputListGuard, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self._guard = guard

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace,
                 values: Any, option_string: str | None = None) -> None:
        self._guard.open(values)
        setattr(namespace, self.dest, values)


def _build_parser(guard: InputListGuard, prog: str) -> _ArgumentParser:
    parser = _ArgumentParser(prog=prog, add_help=False, usage=argparse.SUPPRESS)
    parser.add_argument("-h", "--help", action=_HelpAction)
    parser.add_argument("-V", "--version", action=_VersionAction)
    parser.add_argument(
        "--files-max",
        dest="files_max",
        type=parse_files_max,
        default=DEFAULT_FILES_MAX,
        metavar="INT",
    )
    parser.add_argument(
        "--file-size-max",
        dest="file_size_max",
        type=parse_file_size_max,
        default=DEFAULT_FILE_SIZE_MAX,
        metavar="BYTES",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=parse_timeout,
        default=DEFAULT_TIMEOUT,
        metavar="SEC",
    )
    parser.add_argument(
        "--filelist",
        dest="filelist",
        action=_FileListAction,
        guard=guard,
        default=None,
        metavar="PATH",
    )
    parser.add_argument("positionals", nargs="*")
    return parser


_TERMINAL_OPTIONS = frozenset({"-h", "--help", "-V", "--version"})
_VALUE_OPTIONS = frozenset({"--files-max", "--file-size-max", "--timeout", "--filelist"})
_LONG_OPTIONS = tuple(sorted(opt for opt in _TERMINAL_OPTIONS | _VALUE_OPTIONS if opt.startswith("--")))
_NEGATIVE_NUMBER = re.compile(r"-[0-9]+(\.[0-9]*)?")


def _resolve_long_option(name: str) -> str | None:
    """Return the option *name* abbreviates, ``None`` if unknown, or *name* if ambiguous."""
    if name in _LONG_OPTIONS:
        return name
    matches = [opt for opt in _LONG_OPTIONS if opt.startswith(name)]
    if not matches:
        return None
    if len(matches) > 1:
        # argparse reports the ambiguity itself.
        return name
    return matches[0]


def _reject_unknown_options(parser: _ArgumentParser, argv: Sequence[str]) -> None:
    """Fail on the first unknown option that precedes any help or version flag.

    argparse collects unknown options and complains only after every
    action has run, which would let a later ``-h`` win over an earlier
    bad flag.
    """
    skip_value = False
    for token in argv:
        if skip_value:
            skip_value = False
            continue
        if token == "--":
            return
        if not token.startswith("-") or token == "-" or _NEGATIVE_NUMBER.fullmatch(token):
            continue

        if token.startswith("--"):
            name, has_value, _ = token.partition("=")
            option = _resolve_long_option(name)
            if option is None:
                parser.error(f"unrecognized arguments: {token}")
            if option in _TERMINAL_OPTIONS:
                return
            skip_value = option in _VALUE_OPTIONS and not has_value
            continue

        short = token[:2]
        if short in _TERMINAL_OPTIONS:
            return
        parser.error(f"unrecognized arguments: {token}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_argv(
    argv: Sequence[str],
    guard: InputListGuard,
    *,
    prog: str = PROG,
) -> ParsedArguments | None:
    """Parse *argv* (without the program name).

    Returns
    -------
    ParsedArguments | None
        ``None`` when help or the version was printed and the caller
        should exit successfully without dispatching.

    Raises
    ------
    ValidationError
        For a malformed or non-positive ``--files-max``,
        ``--file-size-max`` or ``--timeout``.
    FileListError
        When the ``--filelist`` path cannot be opened.
    UsageError
        For unknown options, a repeated ``--filelist``, or anything but
        one or two positional arguments.  Help text is printed first for
        positional-count errors.
    """
    parser = _build_parser(guard, prog)
    _reject_unknown_options(parser, argv)
    try:
        namespace = parser.parse_intermixed_args(list(argv))
    except _StopParsing as stop:
        print(stop.output, end="")
        return None

    positionals = tuple(namespace.positionals or ())
    if not 1 <= len(positionals) <= 2:
        print(render_help(prog), end="")
        raise UsageError(
            f"Expected a verb and at most one path, got {len(positionals)} arguments.",
        )

    config = ReadaheadConfig(
        files_max=namespace.files_max,
        file_size_max=namespace.file_size_max,
        timeout=namespace.timeout,
        input_list=guard.handle,
    )
    return ParsedArguments(config=config, positionals=positionals)
