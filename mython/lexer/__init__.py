"""
Mython Lexer Package

Implements the lexical analyzer for Mython, a small Python-like scripting
language. Source text becomes a flat, immutable token buffer read through a
forward-only cursor.

Key Features:
- Indentation-derived Indent/Dedent tokens (two spaces per level)
- Keyword recognition and two-character comparison operators
- Quoted strings with \\n and \\t escapes
- Lenient handling of malformed input, with an opt-in strict mode
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .config import LexerConfig
from .cursor import TokenCursor
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexerError, LexerWarning, CursorOutOfRangeError

__all__ = [
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",
    "TokenCursor",
    "SourceLocation",
    "LexerError",
    "LexerWarning",
    "CursorOutOfRangeError",
    "tokenize",
    "tokenize_file",
]
