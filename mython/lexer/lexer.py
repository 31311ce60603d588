"""
Mython Lexer - turns source text into a flat token buffer

The whole input is tokenized up front, one physical line at a time. Block
structure comes from leading spaces: every `indent_width` spaces is one
level, and each change of level between logical lines becomes that many
Indent or Dedent tokens. Blank and comment-only lines are dropped before
indentation is looked at.

Malformed input (stray characters, unterminated strings, oversized
numbers) is tolerated by default and recorded as warnings; with
`LexerConfig(strict=True)` it raises LexerError instead.
"""

import io
import logging
import string
from dataclasses import replace
from typing import Any, Callable, List, Optional, TextIO, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, COMPARISON_OPERATORS,
    COMPARISON_STARTS, CHAR_TOKENS, QUOTES, ESCAPE_SEQUENCES
)
from .errors import (
    LexerError, LexerWarning, create_invalid_character_error,
    create_unterminated_string_error, create_number_overflow_error
)
from .config import LexerConfig
from .cursor import TokenCursor

log = logging.getLogger(__name__)


def _is_identifier_char(char: str) -> bool:
    return char == "_" or (char not in string.whitespace and char not in string.punctuation)


class _LineScanner:
    """Character cursor over one line with explicit lookahead."""

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at a character ahead without advancing."""
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def get(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self.position += 1
        return char

    def advance(self, count: int = 1):
        self.position = min(self.position + count, len(self.text))

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.position
        while not self.at_end() and predicate(self.text[self.position]):
            self.position += 1
        return self.text[start:self.position]


class Lexer:
    """
    Mython lexical analyzer.

    Tokenizes the whole input stream during construction; afterwards the
    token buffer is immutable and only the read cursor moves.
    """

    def __init__(self, stream: TextIO, config: Optional[LexerConfig] = None):
        """
        Tokenize a text stream.

        Args:
            stream: Source text, consumed once
            config: Lexer options; defaults to lenient mode

        Raises:
            LexerError: On malformed input, in strict mode only
        """
        self.config = config or LexerConfig()
        self.warnings: List[LexerWarning] = []
        self._pending: List[Token] = []

        indent_level = 0
        line_no = 0
        for line_no, raw_line in enumerate(stream, start=1):
            line = _strip_line_ending(raw_line)
            if _is_blank_line(line):
                continue

            content = line.lstrip(" ")
            indent = len(line) - len(content)
            indent_level = self._set_indent_level(
                indent_level, indent // self.config.indent_width, line_no
            )
            self._read_line(_LineScanner(content), line_no, indent)

        self._set_indent_level(indent_level, 0, line_no + 1)
        self._emit(TokenType.EOF, None, line_no + 1, 1)

        self._tokens: Tuple[Token, ...] = tuple(self._pending)
        del self._pending
        self._cursor = TokenCursor(self._tokens)

        log.debug("Tokenized %d lines of %s into %d tokens",
                  line_no, self.config.filename, len(self._tokens))

    @classmethod
    def from_string(cls, source: str, config: Optional[LexerConfig] = None) -> "Lexer":
        return cls(io.StringIO(source), config)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """The complete token buffer, ending with Eof."""
        return self._tokens

    def cursor(self) -> TokenCursor:
        """Create an independent cursor positioned at the first token."""
        return TokenCursor(self._tokens)

    def current_token(self) -> Token:
        return self._cursor.current_token()

    def next_token(self) -> Token:
        return self._cursor.next_token()

    def expect(self, token_type: TokenType, value: Optional[Any] = None) -> Token:
        return self._cursor.expect(token_type, value)

    def expect_next(self, token_type: TokenType, value: Optional[Any] = None) -> Token:
        return self._cursor.expect_next(token_type, value)

    def has_warnings(self) -> bool:
        """Check if the lexer tolerated any malformed input."""
        return len(self.warnings) > 0

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.config.filename, line, column)

    def _emit(self, token_type: TokenType, value: Any, line: int, column: int):
        self._pending.append(Token(token_type, value, self._location(line, column)))

    def _recover(self, error: LexerError):
        """Raise in strict mode, otherwise record a warning and continue."""
        if self.config.strict:
            raise error
        warning = LexerWarning.from_error(error)
        self.warnings.append(warning)
        log.warning("%s at %s", warning.diagnostic.message, warning.diagnostic.location)

    def _set_indent_level(self, current: int, new_level: int, line_no: int) -> int:
        for _ in range(current, new_level):
            self._emit(TokenType.INDENT, None, line_no, 1)
        for _ in range(new_level, current):
            self._emit(TokenType.DEDENT, None, line_no, 1)
        return new_level

    def _read_line(self, scanner: _LineScanner, line_no: int, indent: int):
        """Tokenize one indentation-stripped line, closing it with Newline."""
        emitted = len(self._pending)

        while not scanner.at_end():
            column = indent + scanner.position + 1
            char = scanner.peek()

            if char == " ":
                scanner.advance()
            elif char == "#":
                # Trailing comment
                break
            elif char in string.digits:
                self._read_number(scanner, line_no, column)
            elif char in COMPARISON_STARTS and scanner.peek(1) == "=":
                scanner.advance(2)
                self._emit(COMPARISON_OPERATORS[char + "="], None, line_no, column)
            elif char in CHAR_TOKENS or char in COMPARISON_STARTS:
                scanner.advance()
                self._emit(TokenType.CHAR, char, line_no, column)
            elif char in QUOTES:
                scanner.advance()
                self._read_string(scanner, char, line_no, column)
            elif char in string.punctuation and char != "_":
                # Punctuation that can never start an identifier
                scanner.advance()
                self._emit(TokenType.CHAR, char, line_no, column)
            elif char in string.printable:
                self._read_identifier(scanner, line_no, column)
            else:
                scanner.advance()
                self._recover(create_invalid_character_error(
                    char, self._location(line_no, column)))

        if len(self._pending) > emitted:
            self._emit(TokenType.NEWLINE, None, line_no, indent + scanner.position + 1)

    def _read_identifier(self, scanner: _LineScanner, line_no: int, column: int):
        """Read an identifier or keyword; punctuation is left for re-dispatch."""
        text = scanner.take_while(_is_identifier_char)
        if scanner.peek() is not None and scanner.peek() in string.whitespace:
            scanner.advance()

        if not text:
            return
        token_type = KEYWORDS.get(text)
        if token_type is not None:
            self._emit(token_type, None, line_no, column)
        else:
            self._emit(TokenType.ID, text, line_no, column)

    def _read_string(self, scanner: _LineScanner, delimiter: str, line_no: int, column: int):
        """Read a quoted literal; the opening delimiter is already consumed."""
        chars = []
        while True:
            char = scanner.get()
            if char is None:
                self._recover(create_unterminated_string_error(
                    delimiter, self._location(line_no, column)))
                break
            if char == delimiter:
                break
            if char == "\\":
                escaped = scanner.get()
                if escaped is None:
                    chars.append(char)
                else:
                    chars.append(ESCAPE_SEQUENCES.get(escaped, escaped))
            else:
                chars.append(char)

        self._emit(TokenType.STRING, "".join(chars), line_no, column)

    def _read_number(self, scanner: _LineScanner, line_no: int, column: int):
        lexeme = scanner.take_while(lambda c: c in string.digits)
        value, overflow = self.config.parse_int(lexeme)
        if overflow:
            self._recover(create_number_overflow_error(
                _abbreviate(lexeme), self._location(line_no, column), self.config.int_bits))
        self._emit(TokenType.NUMBER, value, line_no, column)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _abbreviate(lexeme: str, limit: int = 40) -> str:
    if len(lexeme) <= limit:
        return lexeme
    return f"{lexeme[:limit]}... ({len(lexeme)} digits)"


def _is_blank_line(line: str) -> bool:
    """
    Check if a line produces no tokens and leaves indentation untouched.

    That covers empty and all-space lines, comment-only lines, and lines
    whose single non-space character is the last one after some indent.
    """
    content = line.lstrip(" ")
    if not content or content[0] == "#":
        return True
    return len(content) == 1 and len(line) > 1


def tokenize(source: str, config: Optional[LexerConfig] = None) -> Tuple[Token, ...]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer options

    Returns:
        Token buffer ending with Eof

    Raises:
        LexerError: On malformed input, in strict mode only
    """
    return Lexer.from_string(source, config).tokens


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> Tuple[Token, ...]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file (UTF-8)
        config: Lexer options; the filename defaults to `filepath`

    Returns:
        Token buffer ending with Eof

    Raises:
        LexerError: On malformed input, in strict mode only
        OSError: If file cannot be read
    """
    config = config or LexerConfig()
    if config.filename == LexerConfig.filename:
        config = replace(config, filename=str(filepath))
    with open(filepath, 'r', encoding='utf-8') as f:
        return Lexer(f, config).tokens
