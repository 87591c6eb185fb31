"""readahead — command-line front end for boot-time disk read-ahead.

Parses global options, selects one of the ``collect``, ``replay`` or
``analyze`` verbs, and hands off to an installed read-ahead engine.
"""

from readahead.version import __version__

__all__: list[str] = ["__version__"]
