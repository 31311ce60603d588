"""
Forward-only read cursor over a built token buffer.
"""

from typing import Any, Optional, Sequence

from .tokens import Token, TokenType
from .errors import CursorOutOfRangeError, create_unexpected_token_error


class TokenCursor:
    """
    A monotonic read position into an immutable token sequence.

    The last token is sticky: advancing while on it is a no-op, so a
    consumer reading a buffer that ends in Eof keeps seeing Eof.
    """

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tokens
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def current_token(self) -> Token:
        """Return the token under the cursor."""
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        raise CursorOutOfRangeError(self._position, len(self._tokens))

    def next_token(self) -> Token:
        """Advance unless on the last token, then return the current token."""
        if self._position + 1 < len(self._tokens):
            self._position += 1
        return self.current_token()

    def check(self, token_type: TokenType, value: Optional[Any] = None) -> bool:
        """Check if the current token matches without consuming it."""
        token = self.current_token()
        if token.type != token_type:
            return False
        return value is None or token.value == value

    def expect(self, token_type: TokenType, value: Optional[Any] = None) -> Token:
        """
        Return the current token if it has the given type (and value).

        Raises:
            LexerError: If the current token does not match
        """
        if self.check(token_type, value):
            return self.current_token()

        expected = token_type.value if value is None else f"{token_type.value}{{{value}}}"
        raise create_unexpected_token_error(expected, self.current_token())

    def expect_next(self, token_type: TokenType, value: Optional[Any] = None) -> Token:
        """Advance, then expect the given type (and value)."""
        self.next_token()
        return self.expect(token_type, value)
