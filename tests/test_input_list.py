"""Tests for the input-list guard (infra/input_list.py).

Coverage:
* Open / expose / close lifecycle.
* Exactly-once close, including repeated ``close()`` and ``__exit__``.
* Failed opens leave the guard empty.
* A second ``open()`` releases the first handle before failing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO
from unittest.mock import MagicMock

import pytest

from readahead.exceptions import FileListError, ResourceError, UsageError
from readahead.infra.input_list import InputListGuard


class TestOpen:
    def test_starts_empty(self) -> None:
        assert InputListGuard().handle is None

    def test_open_returns_readable_handle(self, file_list: Path) -> None:
        guard = InputListGuard()
        handle = guard.open(str(file_list))
        try:
            assert guard.handle is handle
            assert handle.read().splitlines() == ["/usr/bin/bash", "/etc/fstab"]
        finally:
            guard.close()

    def test_missing_path(self, tmp_path: Path) -> None:
        guard = InputListGuard()
        missing = tmp_path / "missing.list"
        with pytest.raises(FileListError) as exc_info:
            guard.open(str(missing))
        assert guard.handle is None
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_missing_path_is_a_resource_error(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceError):
            InputListGuard().open(str(tmp_path / "missing.list"))

    def test_second_open_closes_first_then_fails(
        self, file_list: Path, opened_handles: list[TextIO],
    ) -> None:
        guard = InputListGuard()
        first = guard.open(str(file_list))
        with pytest.raises(UsageError):
            guard.open(str(file_list))
        assert first.closed
        assert guard.handle is None
        assert opened_handles == [first]

    def test_non_utf8_content_is_readable(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.list"
        path.write_bytes(b"/srv/caf\xe9\n")
        with InputListGuard() as guard:
            handle = guard.open(str(path))
            assert handle.readline().startswith("/srv/caf")


class TestClose:
    def test_context_manager_closes(self, file_list: Path) -> None:
        with InputListGuard() as guard:
            handle = guard.open(str(file_list))
        assert handle.closed
        assert guard.handle is None

    def test_context_manager_closes_on_error(self, file_list: Path) -> None:
        with pytest.raises(RuntimeError):
            with InputListGuard() as guard:
                handle = guard.open(str(file_list))
                raise RuntimeError("engine blew up")
        assert handle.closed

    def test_close_without_handle_is_noop(self) -> None:
        guard = InputListGuard()
        guard.close()
        guard.close()
        assert guard.handle is None

    def test_closes_exactly_once(self) -> None:
        guard = InputListGuard()
        fake = MagicMock()
        guard._handle = fake
        with guard:
            guard.close()
        fake.close.assert_called_once_with()

    def test_exit_does_not_swallow(self) -> None:
        with pytest.raises(KeyError):
            with InputListGuard():
                raise KeyError("x")
