"""Lexical scanner for the Lox scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str) -> list[Token]:
    """Scan Lox source into tokens, raising LexError on the first fault."""
    from loxscan.scanner import scan as _scan

    return _scan(source)
