"""Token kinds, the token record, the keyword table, and character classes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenKind(Enum):
    # Single-character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # literal is the body without quotes
    NUMBER = auto()  # literal is the digits as written

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token: its kind, source slice, literal text, and start line."""

    kind: TokenKind
    lexeme: str
    literal: str
    line: int

    def __str__(self) -> str:
        return f"{self.kind.name} {self.literal}"


KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "fun": TokenKind.FUN,
        "for": TokenKind.FOR,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)

SINGLE_CHAR_TOKENS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
)

# Operator char -> (kind alone, kind when followed by '=')
COMPARISON_TOKENS: MappingProxyType[str, tuple[TokenKind, TokenKind]] = MappingProxyType(
    {
        "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
        "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
        "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
        ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    }
)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9" and len(ch) == 1


def is_alpha(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


def is_alphanumeric(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch)
