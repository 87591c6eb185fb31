"""Core / service layer — configuration, verbs and dispatch.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from readahead.core.dispatch_service import DEFAULT_COLLECT_ROOT, DispatchService
from readahead.core.models import ReadaheadConfig, Verb, VerbRequest
from readahead.core.protocols import ReadaheadEngine

__all__: list[str] = [
    "DEFAULT_COLLECT_ROOT",
    "DispatchService",
    "ReadaheadConfig",
    "ReadaheadEngine",
    "Verb",
    "VerbRequest",
]
