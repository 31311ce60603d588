"""
Test suite for Mython token equality and rendering.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from mython.lexer.tokens import Token, TokenType, SourceLocation


class TestTokenEquality(unittest.TestCase):
    """Tokens compare by type and payload only."""

    def test_valued_tokens(self):
        self.assertEqual(Token.number(1), Token.number(1))
        self.assertNotEqual(Token.number(1), Token.number(2))
        self.assertEqual(Token.id("x"), Token.id("x"))
        self.assertNotEqual(Token.id("x"), Token.string("x"))
        self.assertNotEqual(Token.char("="), Token.of(TokenType.EQ))

    def test_unvalued_tokens(self):
        self.assertEqual(Token.of(TokenType.INDENT), Token.of(TokenType.INDENT))
        self.assertNotEqual(Token.of(TokenType.INDENT), Token.of(TokenType.DEDENT))
        self.assertNotEqual(Token.of(TokenType.NONE), Token.id("None"))

    def test_location_is_ignored(self):
        here = Token(TokenType.ID, "x", SourceLocation("a.my", 1, 1))
        there = Token(TokenType.ID, "x", SourceLocation("b.my", 9, 4))
        self.assertEqual(here, there)
        self.assertEqual(len({here, there, Token.id("x")}), 1)

    def test_of_rejects_valued_types(self):
        with self.assertRaises(ValueError):
            Token.of(TokenType.NUMBER)

    def test_unvalued_types_reject_a_value(self):
        with self.assertRaises(ValueError):
            Token(TokenType.EOF, "x")
        self.assertEqual(Token(TokenType.EOF), Token.of(TokenType.EOF))


class TestTokenRendering(unittest.TestCase):
    """Rendering is the type name plus any payload in braces."""

    def test_valued(self):
        self.assertEqual(str(Token.number(42)), "Number{42}")
        self.assertEqual(str(Token.id("x")), "Id{x}")
        self.assertEqual(str(Token.string("hi there")), "String{hi there}")
        self.assertEqual(str(Token.char("=")), "Char{=}")

    def test_unvalued(self):
        self.assertEqual(str(Token.of(TokenType.EOF)), "Eof")
        self.assertEqual(str(Token.of(TokenType.NOT_EQ)), "NotEq")
        self.assertEqual(str(Token.of(TokenType.GREATER_OR_EQ)), "GreaterOrEq")
        self.assertEqual(str(Token.of(TokenType.NONE)), "None")

    def test_repr(self):
        self.assertEqual(repr(Token.id("x")), "Token(ID, 'x')")
        self.assertEqual(repr(Token.of(TokenType.DEDENT)), "Token(DEDENT)")


class TestTokenProperties(unittest.TestCase):

    def test_categories(self):
        self.assertTrue(Token.of(TokenType.CLASS).is_keyword)
        self.assertFalse(Token.id("klass").is_keyword)
        self.assertTrue(Token.of(TokenType.NEWLINE).is_structural)
        self.assertFalse(Token.of(TokenType.EQ).is_structural)
        self.assertTrue(Token.string("").is_valued)
        self.assertFalse(Token.of(TokenType.TRUE).is_valued)

    def test_is_char(self):
        self.assertTrue(Token.char(":").is_char(":"))
        self.assertFalse(Token.char(":").is_char(";"))
        self.assertFalse(Token.string(":").is_char(":"))


if __name__ == '__main__':
    unittest.main()
