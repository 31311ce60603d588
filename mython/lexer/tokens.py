"""
Token definitions for the Mython lexer.

This module defines every token kind the lexer can produce:
- Valued tokens (numbers, identifiers, strings, single characters)
- Reserved keywords
- Two-character comparison operators
- Structural tokens synthesized from layout (Newline, Indent, Dedent, Eof)

Each ``TokenType`` value is the display name used when a token is rendered,
so ``str(token)`` gives ``Number{42}``, ``Id{x}`` or ``Indent``.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional


class TokenType(Enum):
    """
    Enumeration of all token kinds in Mython.

    The set is closed: a token always carries exactly one of these types.
    """

    # ========================================================================
    # Valued Tokens
    # ========================================================================
    NUMBER = "Number"               # 42
    ID = "Id"                       # variable_name
    STRING = "String"               # 'hello', "world"
    CHAR = "Char"                   # = ( ) , . : ; * / + - ...

    # ========================================================================
    # Keywords
    # ========================================================================
    CLASS = "Class"
    RETURN = "Return"
    IF = "If"
    ELSE = "Else"
    DEF = "Def"
    PRINT = "Print"
    AND = "And"
    OR = "Or"
    NOT = "Not"
    NONE = "None"
    TRUE = "True"
    FALSE = "False"

    # ========================================================================
    # Comparison Operators
    # ========================================================================
    EQ = "Eq"                       # ==
    NOT_EQ = "NotEq"                # !=
    LESS_OR_EQ = "LessOrEq"         # <=
    GREATER_OR_EQ = "GreaterOrEq"   # >=

    # ========================================================================
    # Structural Tokens
    # ========================================================================
    NEWLINE = "Newline"             # End of a logical line
    INDENT = "Indent"               # Indentation increase (one unit)
    DEDENT = "Dedent"               # Indentation decrease (one unit)
    EOF = "Eof"                     # End of input, always last


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics; never part of token equality.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Mython language.

    Two tokens are equal when they share a type and, for valued types,
    an equal payload. The source location is carried for diagnostics only.
    """
    type: TokenType
    value: Any = None
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        if self.value is not None and self.type not in VALUED_TYPES:
            raise ValueError(f"{self.type.value} tokens carry no value, got {self.value!r}")

    def __str__(self) -> str:
        if self.type in VALUED_TYPES:
            return f"{self.type.value}{{{self.value}}}"
        return self.type.value

    def __repr__(self) -> str:
        if self.type in VALUED_TYPES:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenType.NUMBER, value)

    @classmethod
    def id(cls, name: str) -> "Token":
        return cls(TokenType.ID, name)

    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenType.STRING, text)

    @classmethod
    def char(cls, char: str) -> "Token":
        return cls(TokenType.CHAR, char)

    @classmethod
    def of(cls, token_type: TokenType) -> "Token":
        """Build an unvalued token (keyword, operator or structural)."""
        if token_type in VALUED_TYPES:
            raise ValueError(f"{token_type.value} tokens require a value")
        return cls(token_type)

    @property
    def is_valued(self) -> bool:
        """Check if this token carries a payload."""
        return self.type in VALUED_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_structural(self) -> bool:
        """Check if this token was synthesized from layout."""
        return self.type in STRUCTURAL_TYPES

    def is_char(self, char: str) -> bool:
        return self.type == TokenType.CHAR and self.value == char


VALUED_TYPES: FrozenSet[TokenType] = frozenset({
    TokenType.NUMBER, TokenType.ID, TokenType.STRING, TokenType.CHAR,
})

STRUCTURAL_TYPES: FrozenSet[TokenType] = frozenset({
    TokenType.NEWLINE, TokenType.INDENT, TokenType.DEDENT, TokenType.EOF,
})

# Reserved words, matched against the full identifier text
KEYWORDS: Dict[str, TokenType] = {
    "class": TokenType.CLASS,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "def": TokenType.DEF,
    "print": TokenType.PRINT,
    "or": TokenType.OR,
    "None": TokenType.NONE,
    "and": TokenType.AND,
    "not": TokenType.NOT,
    "True": TokenType.TRUE,
    "False": TokenType.FALSE,
}

KEYWORD_TYPES: FrozenSet[TokenType] = frozenset(KEYWORDS.values())

# Two-character operators, keyed by their full text
COMPARISON_OPERATORS: Dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
    "<=": TokenType.LESS_OR_EQ,
    ">=": TokenType.GREATER_OR_EQ,
}

# First characters of the comparison operators; alone they lex as Char
COMPARISON_STARTS: FrozenSet[str] = frozenset(op[0] for op in COMPARISON_OPERATORS)

# Characters always emitted as a Char token
CHAR_TOKENS: FrozenSet[str] = frozenset("*/+-(),.:;\t\n")

QUOTES: FrozenSet[str] = frozenset("'\"")

# Only these escapes are translated; any other escaped character is kept as-is
ESCAPE_SEQUENCES: Dict[str, str] = {
    "n": "\n",
    "t": "\t",
}
