"""Infrastructure: discovery of the installed read-ahead engine.

The collect, replay and analyze algorithms ship separately and register
a zero-argument factory under the ``readahead.engines`` entry-point
group, e.g.::

    [project.entry-points."readahead.engines"]
    native = "readahead_native:NativeEngine"

Engines are imported lazily, only once a verb is about to run, so that
``--help``, ``--version`` and argument errors work without any engine
installed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from importlib.metadata import EntryPoint, entry_points

from readahead.core.protocols import ReadaheadEngine
from readahead.exceptions import EngineUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "readahead.engines"
ENGINE_ENV_VAR: str = "READAHEAD_ENGINE"

_INSTALL_HINT = (
    "Install a package that registers an engine under the "
    f"'{ENTRY_POINT_GROUP}' entry-point group."
)


def available_engines() -> dict[str, EntryPoint]:
    """Return installed engine entry points keyed by name."""
    return {ep.name: ep for ep in entry_points(group=ENTRY_POINT_GROUP)}


def load_engine(
    name: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ReadaheadEngine:
    """Instantiate the engine called *name*, or the only one installed.

    When *name* is ``None`` the ``READAHEAD_ENGINE`` environment variable
    is consulted.

    Raises
    ------
    EngineUnavailableError
        When no engine is installed, the requested name is unknown,
        several engines are installed and none was named, or the engine
        fails to import.
    """
    env = os.environ if environ is None else environ
    if name is None:
        name = env.get(ENGINE_ENV_VAR) or None

    engines = available_engines()
    if not engines:
        raise EngineUnavailableError(
            "No read-ahead engine is installed.",
            hint=_INSTALL_HINT,
        )

    if name is None:
        if len(engines) > 1:
            raise EngineUnavailableError(
                f"Several read-ahead engines are installed: {', '.join(sorted(engines))}.",
                hint=f"Choose one with {ENGINE_ENV_VAR}=<name>.",
            )
        entry_point = next(iter(engines.values()))
    else:
        try:
            entry_point = engines[name]
        except KeyError:
            raise EngineUnavailableError(
                f"Read-ahead engine {name!r} is not installed.",
                hint=f"Installed engines: {', '.join(sorted(engines))}.",
            ) from None

    logger.debug("Loading read-ahead engine %s (%s)", entry_point.name, entry_point.value)
    try:
        factory = entry_point.load()
    except ImportError as exc:
        raise EngineUnavailableError(
            f"Read-ahead engine {entry_point.name!r} failed to import: {exc}",
            hint=_INSTALL_HINT,
        ) from exc
    engine: ReadaheadEngine = factory()
    return engine
