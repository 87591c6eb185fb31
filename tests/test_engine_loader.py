"""Tests for engine discovery (infra/engine_loader.py).

``importlib.metadata.entry_points`` is patched — no packages are
installed or imported.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from readahead.exceptions import EngineUnavailableError
from readahead.infra import engine_loader
from readahead.infra.engine_loader import ENGINE_ENV_VAR, ENTRY_POINT_GROUP, load_engine


def _entry_point(name: str, factory: Any = None, error: BaseException | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.value = f"{name}_pkg:Engine"
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = factory or MagicMock(return_value=f"{name}-engine")
    return ep


@pytest.fixture
def installed(monkeypatch: pytest.MonkeyPatch) -> list[MagicMock]:
    """Mutable list of fake entry points returned for the engine group."""
    eps: list[MagicMock] = []

    def fake_entry_points(*, group: str) -> list[MagicMock]:
        assert group == ENTRY_POINT_GROUP
        return list(eps)

    monkeypatch.setattr(engine_loader, "entry_points", fake_entry_points)
    return eps


class TestLoadEngine:
    def test_none_installed(self, installed: list[MagicMock]) -> None:
        with pytest.raises(EngineUnavailableError, match="No read-ahead engine") as exc_info:
            load_engine(environ={})
        assert exc_info.value.hint is not None
        assert ENTRY_POINT_GROUP in exc_info.value.hint

    def test_single_engine_is_used(self, installed: list[MagicMock]) -> None:
        installed.append(_entry_point("native"))
        assert load_engine(environ={}) == "native-engine"

    def test_factory_is_called_without_arguments(self, installed: list[MagicMock]) -> None:
        factory = MagicMock(return_value="made")
        installed.append(_entry_point("native", factory=factory))
        load_engine(environ={})
        factory.assert_called_once_with()

    def test_several_engines_need_a_name(self, installed: list[MagicMock]) -> None:
        installed.extend([_entry_point("a"), _entry_point("b")])
        with pytest.raises(EngineUnavailableError, match="a, b") as exc_info:
            load_engine(environ={})
        assert ENGINE_ENV_VAR in (exc_info.value.hint or "")

    def test_named_engine(self, installed: list[MagicMock]) -> None:
        installed.extend([_entry_point("a"), _entry_point("b")])
        assert load_engine("b", environ={}) == "b-engine"

    def test_name_from_environment(self, installed: list[MagicMock]) -> None:
        installed.extend([_entry_point("a"), _entry_point("b")])
        assert load_engine(environ={ENGINE_ENV_VAR: "a"}) == "a-engine"

    def test_explicit_name_beats_environment(self, installed: list[MagicMock]) -> None:
        installed.extend([_entry_point("a"), _entry_point("b")])
        assert load_engine("b", environ={ENGINE_ENV_VAR: "a"}) == "b-engine"

    def test_unknown_name(self, installed: list[MagicMock]) -> None:
        installed.append(_entry_point("a"))
        with pytest.raises(EngineUnavailableError, match="'zzz' is not installed"):
            load_engine("zzz", environ={})

    def test_import_failure(self, installed: list[MagicMock]) -> None:
        installed.append(_entry_point("broken", error=ImportError("no module named x")))
        with pytest.raises(EngineUnavailableError, match="failed to import"):
            load_engine(environ={})

    def test_available_engines_by_name(self, installed: list[MagicMock]) -> None:
        installed.extend([_entry_point("a"), _entry_point("b")])
        assert sorted(engine_loader.available_engines()) == ["a", "b"]
