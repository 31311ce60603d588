"""
Error handling for the Mython lexer.

Provides diagnostics with source location information for the lenient
(warning) and strict (error) handling of malformed input, plus the
contract violation raised when a token cursor runs past its buffer.
"""

from typing import Optional, List
from dataclasses import dataclass, replace

from .tokens import SourceLocation, Token, TokenType, KEYWORDS


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class _DiagnosticReport:
    """Shared access to the diagnostic behind an error or warning."""

    diagnostic: Diagnostic

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(_DiagnosticReport, Exception):
    """
    Exception raised for malformed input in strict mode, and for
    unexpected tokens met through a token cursor.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )


class LexerWarning(_DiagnosticReport):
    """
    Represents malformed input the lexer tolerated in lenient mode.
    """

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = replace(diagnostic, severity="warning")

    @classmethod
    def from_error(cls, error: LexerError) -> "LexerWarning":
        """Downgrade a strict-mode error to a warning."""
        return cls(error.diagnostic)


class CursorOutOfRangeError(IndexError):
    """
    Raised when a token cursor is read past the end of its buffer.

    A built token buffer always ends with Eof and cursors never step past
    it, so this signals a broken consumer rather than bad input.
    """

    def __init__(self, position: int, size: int):
        super().__init__(f"token cursor at {position} is outside a buffer of {size} tokens")
        self.position = position
        self.size = size


class ErrorRecovery:
    """
    Utilities for building helpful diagnostics.
    """

    @staticmethod
    def suggest_keyword_corrections(invalid_word: str) -> List[str]:
        """Suggest keywords close to a word using edit distance."""
        suggestions = []
        for keyword in KEYWORDS:
            distance = ErrorRecovery._edit_distance(invalid_word, keyword)
            if 0 < distance <= 2:
                suggestions.append(keyword)

        return sorted(suggestions, key=lambda k: ErrorRecovery._edit_distance(invalid_word, k))[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L007": "Number literal overflow",
    "L011": "Unexpected token",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character outside the ASCII source alphabet."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Mython source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(quote_type: str, location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to the end of its line."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text=f"String literals must be closed with a matching {quote_type} quote on the same line.",
        suggestions=[f"Add a closing {quote_type} quote"]
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation, bits: int) -> LexerError:
    """Create an error for an integer literal wider than the configured width."""
    return LexerError(
        message=f"Number literal overflow: '{lexeme}'",
        location=location,
        code="L007",
        help_text=f"Integer literals must fit in a signed {bits}-bit integer.",
    )


def create_unexpected_token_error(expected: str, found: Token) -> LexerError:
    """Create an error for a token that does not match what a consumer expects."""
    suggestions = None
    if found.type == TokenType.ID:
        suggestions = ErrorRecovery.suggest_keyword_corrections(found.value) or None

    return LexerError(
        message=f"Expected {expected}, found {found}",
        location=found.location,
        code="L011",
        suggestions=suggestions,
    )
