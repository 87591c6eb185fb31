"""Protocols (interfaces) consumed by the core layer.

These define the contract a read-ahead engine must satisfy.  The
collection, replay and analysis algorithms live outside this package;
core code depends ONLY on this protocol, never on a concrete engine.
"""

from __future__ import annotations

from typing import Protocol, TextIO

from readahead.core.models import ReadaheadConfig


class ReadaheadEngine(Protocol):
    """Contract for read-ahead engines.

    Each method returns an integer status: ``0`` on success, anything
    else on failure.  The status becomes the process exit code.
    Implementations should signal expected failures through the status
    or a :class:`~readahead.exceptions.ReadaheadError` subclass; any
    other exception is wrapped in
    :class:`~readahead.exceptions.DispatchError` by the dispatcher.
    """

    def collect(
        self,
        directory: str,
        input_list: TextIO | None,
        *,
        config: ReadaheadConfig,
    ) -> int:
        """Record which files under *directory* are read during early boot.

        Parameters
        ----------
        directory:
            Root of the file system to collect for.  Always set; the
            dispatcher substitutes a default when the user gave none.
        input_list:
            Open text handle listing the files to include, one path per
            line, or ``None`` to let the engine discover files itself.
            The engine must not close it.
        config:
            Limits on file count, file size and collection time.
        """
        ...  # pragma: no cover

    def replay(self, directory: str | None, *, config: ReadaheadConfig) -> int:
        """Prefetch the files recorded for *directory* (``None`` → engine default)."""
        ...  # pragma: no cover

    def analyze(self, pack_file: str | None, *, config: ReadaheadConfig) -> int:
        """Describe the contents of *pack_file*.

        The engine is responsible for reporting a missing or invalid path.
        """
        ...  # pragma: no cover
