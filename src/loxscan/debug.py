"""--debug token table dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from loxscan.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print an aligned table of line, kind, lexeme and literal to *file*."""
    kind_width = max((len(t.kind.name) for t in tokens), default=0)
    line_width = max((len(str(t.line)) for t in tokens), default=1)
    for tok in tokens:
        file.write(f"{tok.line:>{line_width}}  {tok.kind.name:<{kind_width}}  {tok.lexeme!r}")
        if tok.literal:
            file.write(f"  {tok.literal!r}")
        file.write("\n")
