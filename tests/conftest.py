"""Shared pytest fixtures and configuration for the readahead test suite.

Guidelines
----------
* No real read-ahead engine — :class:`FakeEngine` records calls instead.
* No system logging sockets; logging state is reset around tests that
  touch it.
* Every ``--filelist`` handle opened during a test must be closed by the
  time the code under test returns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, TextIO

import pytest

from readahead.core.models import ReadaheadConfig
from readahead.infra import input_list as input_list_module
from readahead.infra import logging_setup


class FakeEngine:
    """In-memory :class:`~readahead.core.protocols.ReadaheadEngine`.

    Each call is appended to :attr:`calls` as a tuple.  For ``collect``
    the first line of the input list, if any, is read while the handle
    is still open and stored in :attr:`first_listed`.
    """

    def __init__(self, status: int = 0, error: BaseException | None = None) -> None:
        self.status = status
        self.error = error
        self.calls: list[tuple[Any, ...]] = []
        self.first_listed: str | None = None

    def _finish(self) -> int:
        if self.error is not None:
            raise self.error
        return self.status

    def collect(self, directory: str, input_list: TextIO | None, *,
                config: ReadaheadConfig) -> int:
        self.calls.append(("collect", directory, input_list, config))
        if input_list is not None:
            self.first_listed = input_list.readline().rstrip("\n")
        return self._finish()

    def replay(self, directory: str | None, *, config: ReadaheadConfig) -> int:
        self.calls.append(("replay", directory, config))
        return self._finish()

    def analyze(self, pack_file: str | None, *, config: ReadaheadConfig) -> int:
        self.calls.append(("analyze", pack_file, config))
        return self._finish()


@pytest.fixture
def engine() -> FakeEngine:
    """A fake engine that succeeds."""
    return FakeEngine()


@pytest.fixture
def file_list(tmp_path: Path) -> Path:
    """A readable input list naming two files."""
    path = tmp_path / "files.list"
    path.write_text("/usr/bin/bash\n/etc/fstab\n", encoding="utf-8")
    return path


@pytest.fixture
def opened_handles(monkeypatch: pytest.MonkeyPatch) -> list[TextIO]:
    """Record every handle the input-list guard opens."""
    handles: list[TextIO] = []
    real_open = open

    def tracking_open(*args: Any, **kwargs: Any) -> TextIO:
        handle = real_open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(input_list_module, "open", tracking_open, raising=False)
    return handles


def _drop_readahead_handlers() -> None:
    logger = logging.getLogger(logging_setup.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clean_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging_setup.LogSettings]:
    """Fresh logging settings and no handlers on the ``readahead`` logger."""
    settings = logging_setup.LogSettings()
    monkeypatch.setattr(logging_setup, "_settings", settings)
    _drop_readahead_handlers()
    yield settings
    _drop_readahead_handlers()


@pytest.fixture
def make_engine() -> type[FakeEngine]:
    """The :class:`FakeEngine` class, for tests that need a custom status or error."""
    return FakeEngine
