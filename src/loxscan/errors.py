"""Lexical error types with formatted diagnostics and source context."""

from __future__ import annotations


class LexError(Exception):
    """Raised on the first lexical fault, carrying the 1-based line where it was detected."""

    def __init__(self, message: str, line: int, where: str = "") -> None:
        self.message = message
        self.line = line
        self.where = where
        super().__init__(self.format())

    def format(self) -> str:
        """Return the one-line diagnostic: ``[line N] Error<where>: <message>``."""
        where = f" {self.where}" if self.where else ""
        return f"[line {self.line}] Error{where}: {self.message}"

    def excerpt(self, source: str, filename: str = "<script>") -> str:
        """Render the diagnostic with the offending source line underneath."""
        # Lines are counted on "\n" only, as the scanner counts them
        lines = source.split("\n")
        line_idx = self.line - 1

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter}"
        )


class UnexpectedCharacter(LexError):
    """A code point that starts no token."""

    def __init__(self, char: str, line: int) -> None:
        self.char = char
        super().__init__("Unexpected character.", line, f"at '{char}'")


class UnterminatedString(LexError):
    """A string literal whose closing quote never arrives."""

    def __init__(self, line: int) -> None:
        super().__init__("Unterminated string.", line)


class UnbalancedComment(LexError):
    """A block comment still open when input runs out."""

    def __init__(self, line: int, depth: int = 1) -> None:
        self.depth = depth
        super().__init__("Unbalanced block comment: missing closing */", line)
