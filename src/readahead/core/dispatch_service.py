"""Core dispatch service — routes a verb to exactly one engine call.

This service delegates the actual work to a
:class:`~readahead.core.protocols.ReadaheadEngine` injected at
construction time.  It is responsible for:

* Supplying the default collect root when no directory was given.
* Handing the ``--filelist`` handle to ``collect`` and to nothing else.
* Ensuring only :class:`~readahead.exceptions.ReadaheadError`
  subclasses escape.

Guarantees
----------
* Pure orchestration, no I/O.
* Never validates that the target path exists; engines do that.
"""

from __future__ import annotations

import logging

from readahead.core.models import ReadaheadConfig, Verb, VerbRequest
from readahead.core.protocols import ReadaheadEngine
from readahead.exceptions import DispatchError, ReadaheadError

logger = logging.getLogger(__name__)

DEFAULT_COLLECT_ROOT: str = "/"
"""Directory handed to ``collect`` when the user names none."""


class DispatchService:
    """Stateless service that invokes one engine per request.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`ReadaheadEngine` protocol.
    """

    def __init__(self, engine: ReadaheadEngine) -> None:
        self._engine: ReadaheadEngine = engine

    def dispatch(self, request: VerbRequest, config: ReadaheadConfig) -> int:
        """Run *request* against the engine and return its status.

        Raises
        ------
        DispatchError
            When the engine raises something other than a
            :class:`ReadaheadError`.
        """
        logger.debug("Dispatching %s (target=%r)", request.verb.value, request.target)
        try:
            status = self._invoke(request, config)
        except ReadaheadError:
            raise
        except Exception as exc:
            raise DispatchError(
                f"{request.verb.value} failed: {exc}",
            ) from exc

        if status != 0:
            logger.debug("%s returned status %d", request.verb.value, status)
        return status

    def _invoke(self, request: VerbRequest, config: ReadaheadConfig) -> int:
        match request.verb:
            case Verb.COLLECT:
                directory = request.target or DEFAULT_COLLECT_ROOT
                return self._engine.collect(directory, config.input_list, config=config)
            case Verb.REPLAY:
                return self._engine.replay(request.target, config=config)
            case Verb.ANALYZE:
                return self._engine.analyze(request.target, config=config)
            case _:
                raise AssertionError(f"unhandled verb {request.verb!r}")
