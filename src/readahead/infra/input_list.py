"""Infrastructure: ownership of the ``--filelist`` handle.

:class:`InputListGuard` is the only object that opens or closes the
input list.  ``main()`` holds one guard for the whole run, so every exit
path (help, parse failure, unknown verb, engine failure, success)
releases the handle exactly once.

Rules
-----
* No retry on open failure.
* No ``print()``; failures are raised, the CLI renders them.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TextIO

from readahead.exceptions import FileListError, UsageError

logger = logging.getLogger(__name__)


class InputListGuard:
    """Context manager owning at most one open input-list handle.

    Usage::

        with InputListGuard() as guard:
            guard.open("/etc/readahead.list")
            engine.collect("/", guard.handle, config=config)
        # handle closed here, whatever happened inside the block
    """

    def __init__(self) -> None:
        self._handle: TextIO | None = None

    @property
    def handle(self) -> TextIO | None:
        """The open handle, or ``None`` when nothing is held."""
        return self._handle

    def open(self, path: str) -> TextIO:
        """Open *path* for reading and take ownership of the handle.

        Raises
        ------
        UsageError
            When a handle is already held.  The held handle is closed
            first so a repeated ``--filelist`` never leaks a descriptor.
        FileListError
            When *path* cannot be opened.  The guard stays empty.
        """
        if self._handle is not None:
            self.close()
            raise UsageError(
                "--filelist may only be given once.",
                hint="Combine all paths into a single list file.",
            )

        try:
            handle = open(path, encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise FileListError(path, exc.strerror or str(exc)) from exc

        self._handle = handle
        logger.info("Using files in %s to generate pack.", path)
        return handle

    def close(self) -> None:
        """Close the held handle, if any.  Safe to call repeatedly."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()

    def __enter__(self) -> InputListGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
