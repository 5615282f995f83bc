"""Lox scanner — converts source text into a flat token list."""

from __future__ import annotations

from loxscan.errors import UnbalancedComment, UnexpectedCharacter, UnterminatedString
from loxscan.tokens import (
    COMPARISON_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
    is_alpha,
    is_alphanumeric,
    is_digit,
)


class Scanner:
    """Tokenize Lox source text into a list of Token objects.

    A Scanner is used for a single scan. The first lexical fault raises a
    LexError subclass and no tokens are returned.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1

    @property
    def line(self) -> int:
        """Current 1-based line of the cursor."""
        return self._line

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", "", self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        idx = self._current + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the next code point if it equals *expected*."""
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _emit(self, kind: TokenKind, literal: str = "") -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(kind, lexeme, literal, self._start_line))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._emit(kind)
            return

        pair = COMPARISON_TOKENS.get(ch)
        if pair is not None:
            single, double = pair
            self._emit(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._emit(TokenKind.SLASH)
            return

        # Newlines are counted by _advance
        if ch in " \t\r\n":
            return

        if ch == '"':
            self._scan_string()
            return

        if is_digit(ch):
            self._scan_number()
            return

        if is_alpha(ch):
            self._scan_identifier()
            return

        raise UnexpectedCharacter(ch, self._line)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while not self._is_at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        """Skip a possibly nested block comment whose opening /* is consumed."""
        depth = 1
        while depth > 0:
            if self._is_at_end():
                raise UnbalancedComment(self._line, depth)
            if self._peek() == "/" and self._peek(1) == "*":
                self._advance()
                self._advance()
                depth += 1
            elif self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                depth -= 1
            else:
                self._advance()

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        while not self._is_at_end() and self._peek() != '"':
            self._advance()

        if self._is_at_end():
            raise UnterminatedString(self._line)

        self._advance()  # closing quote
        self._emit(TokenKind.STRING, self._source[self._start + 1 : self._current - 1])

    def _scan_number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A trailing '.' without a digit after it is left for the next token
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._emit(TokenKind.NUMBER, self._source[self._start : self._current])

    def _scan_identifier(self) -> None:
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        kind = KEYWORDS.get(text)
        if kind is not None:
            self._emit(kind)
        else:
            self._emit(TokenKind.IDENTIFIER, text)


def scan(source: str) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source).scan_tokens()
