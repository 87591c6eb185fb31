"""Usage text covering all three verbs."""

from __future__ import annotations

PROG: str = "readahead"

_TEMPLATE = """\
{prog} [OPTIONS...] collect [DIRECTORY]

Collect read-ahead data on early boot.

  -h --help                 Show this help
  -V --version              Show the version and exit
     --files-max=INT        Maximum number of files to read ahead
     --file-size-max=BYTES  Maximum size of files to read ahead
     --timeout=SEC          Maximum time to spend collecting data
     --filelist=PATH        Inclusive list of files to be used in creating the pack


{prog} [OPTIONS...] replay [DIRECTORY]

Replay collected read-ahead data on early boot.

  -h --help                 Show this help
     --file-size-max=BYTES  Maximum size of files to read ahead


{prog} [OPTIONS...] analyze [PACK FILE]

Analyze collected read-ahead data.

  -h --help                 Show this help
"""


def render_help(prog: str = PROG) -> str:
    """Return the usage text for ``collect``, ``replay`` and ``analyze``."""
    return _TEMPLATE.format(prog=prog)
