"""
Mython Language Package

Front end for Mython, a small Python-like scripting language.

Architecture:
    mython/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # mython-lex token dump tool

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, LexerConfig, Token, TokenType

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__license__",
]
