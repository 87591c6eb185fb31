"""Allow ``python -m readahead`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m readahead`` behaves identically to the ``readahead``
console script.
"""

from __future__ import annotations

from readahead.cli.app import cli

if __name__ == "__main__":
    cli()
