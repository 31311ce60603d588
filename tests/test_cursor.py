"""
Test suite for reading a token buffer through the lexer's cursor.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from mython.lexer import (
    Lexer, LexerError, Token, TokenType, TokenCursor, CursorOutOfRangeError
)


class TestLexerCursor(unittest.TestCase):
    """Test the current_token/next_token protocol used by parsers."""

    def setUp(self):
        """Set up test fixtures."""
        self.lexer = Lexer.from_string("x = 1\n")

    def test_starts_at_first_token(self):
        self.assertEqual(self.lexer.current_token(), Token.id("x"))
        self.assertEqual(self.lexer.current_token(), Token.id("x"))

    def test_next_token_walks_the_buffer(self):
        seen = [self.lexer.current_token()]
        while seen[-1].type != TokenType.EOF:
            seen.append(self.lexer.next_token())
        self.assertEqual(tuple(seen), self.lexer.tokens)

    def test_eof_is_sticky(self):
        for _ in range(len(self.lexer.tokens) + 3):
            self.lexer.next_token()
        self.assertEqual(self.lexer.current_token(), Token.of(TokenType.EOF))
        self.assertEqual(self.lexer.next_token(), Token.of(TokenType.EOF))

    def test_independent_cursors(self):
        first = self.lexer.cursor()
        second = self.lexer.cursor()
        first.next_token()
        first.next_token()
        self.assertEqual(first.current_token(), Token.number(1))
        self.assertEqual(second.current_token(), Token.id("x"))
        self.assertEqual(self.lexer.current_token(), Token.id("x"))

    def test_expect(self):
        self.assertEqual(self.lexer.expect(TokenType.ID), Token.id("x"))
        self.assertEqual(self.lexer.expect(TokenType.ID, "x"), Token.id("x"))
        self.assertEqual(self.lexer.expect_next(TokenType.CHAR, "="), Token.char("="))
        self.assertEqual(self.lexer.expect_next(TokenType.NUMBER).value, 1)
        self.assertEqual(self.lexer.expect_next(TokenType.NEWLINE), Token.of(TokenType.NEWLINE))

    def test_expect_mismatch(self):
        with self.assertRaises(LexerError) as ctx:
            self.lexer.expect(TokenType.NUMBER)
        self.assertEqual(ctx.exception.code, "L011")
        self.assertIn("Expected Number, found Id{x}", str(ctx.exception))

        with self.assertRaises(LexerError):
            self.lexer.expect(TokenType.ID, "y")

    def test_expect_next_advances_before_checking(self):
        with self.assertRaises(LexerError):
            self.lexer.expect_next(TokenType.NUMBER)
        self.assertEqual(self.lexer.current_token(), Token.char("="))

    def test_expect_suggests_keywords(self):
        lexer = Lexer.from_string("retrun 1\n")
        with self.assertRaises(LexerError) as ctx:
            lexer.expect(TokenType.RETURN)
        self.assertIn("return", ctx.exception.diagnostic.suggestions)


class TestTokenCursor(unittest.TestCase):

    def test_out_of_range(self):
        cursor = TokenCursor(())
        with self.assertRaises(CursorOutOfRangeError):
            cursor.current_token()
        with self.assertRaises(IndexError):
            cursor.next_token()

    def test_check(self):
        cursor = TokenCursor((Token.of(TokenType.DEF), Token.of(TokenType.EOF)))
        self.assertTrue(cursor.check(TokenType.DEF))
        self.assertFalse(cursor.check(TokenType.CLASS))
        self.assertEqual(cursor.position, 0)
        cursor.next_token()
        self.assertEqual(cursor.position, 1)


if __name__ == '__main__':
    unittest.main()
