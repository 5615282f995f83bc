"""Test line comments and nested block comments."""

import pytest

from loxscan.errors import UnbalancedComment
from loxscan.scanner import Scanner, scan
from loxscan.tokens import TokenKind

from .conftest import assert_kinds


class TestLineComments:
    def test_comment_only(self, lex):
        assert lex("// nothing here") == []

    def test_comment_ends_at_newline(self, lex):
        tokens = lex("// note\nx")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert tokens[0].line == 2

    def test_comment_after_code(self, lex):
        tokens = lex("a; // trailing")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.SEMICOLON])

    def test_block_opener_inside_line_comment_ignored(self, lex):
        assert lex("// /* not a block") == []


class TestBlockComments:
    def test_simple(self, lex):
        assert lex("/* hi */") == []

    def test_nested_balanced(self):
        tokens = scan("/* a /* b */ c */")
        assert_kinds(tokens, [TokenKind.EOF])

    def test_deeply_nested(self, lex):
        assert lex("/* 1 /* 2 /* 3 */ 2 */ 1 */") == []

    def test_resumes_after_close(self, lex):
        tokens = lex("/* x */+")
        assert_kinds(tokens, [TokenKind.PLUS])

    def test_code_after_nested_close(self, lex):
        tokens = lex("/* /* */ */ a")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])

    def test_newlines_counted(self):
        tokens = scan("/* one\ntwo\n/* three\n*/ */\nx")
        assert tokens[0].kind == TokenKind.IDENTIFIER
        assert tokens[0].line == 5

    def test_stars_inside(self, lex):
        assert lex("/*** decorated ***/") == []

    def test_non_ascii_inside(self, lex):
        tokens = lex("/* ☃ ünïcode */ x")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert tokens[0].lexeme == "x"

    def test_opener_slash_does_not_close(self, lex):
        # "/*/" does not close the comment it opens
        with pytest.raises(UnbalancedComment):
            lex("/*/")


class TestUnbalanced:
    def test_lone_opener(self):
        with pytest.raises(UnbalancedComment) as exc_info:
            scan("/*")
        assert exc_info.value.line == 1

    def test_missing_outer_close(self):
        with pytest.raises(UnbalancedComment) as exc_info:
            scan("/* a /* b */ c")
        assert exc_info.value.depth == 1

    def test_depth_reported(self):
        with pytest.raises(UnbalancedComment) as exc_info:
            scan("/* /* /*")
        assert exc_info.value.depth == 3

    def test_line_at_end_of_input(self):
        with pytest.raises(UnbalancedComment) as exc_info:
            scan("x\n/* open\nstill open\n")
        assert exc_info.value.line == 4

    def test_message(self):
        with pytest.raises(UnbalancedComment, match=r"missing closing \*/"):
            Scanner("/*").scan_tokens()
