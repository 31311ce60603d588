"""
Lexer configuration.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LexerConfig:
    """
    Options controlling how the lexer treats its input.

    Attributes:
        strict: Raise LexerError on malformed input instead of recording
            a warning and carrying on
        int_bits: Width of the signed integer Number literals wrap to
        indent_width: Leading spaces per indentation unit
        filename: Source name used in token locations and diagnostics
    """
    strict: bool = False
    int_bits: int = 32
    indent_width: int = 2
    filename: str = "<string>"

    def __post_init__(self):
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be at least 1, got {self.indent_width}")

    @property
    def int_max(self) -> int:
        return (1 << (self.int_bits - 1)) - 1

    def parse_int(self, digits: str) -> Tuple[int, bool]:
        """
        Fold a run of decimal digits into the configured integer width.

        Returns:
            The wrapped value and whether the literal overflowed
        """
        mask = (1 << self.int_bits) - 1
        value = 0
        overflow = False
        for digit in digits:
            value = value * 10 + (ord(digit) - ord("0"))
            if value > self.int_max:
                overflow = True
            value &= mask
        return self.wrap_int(value), overflow

    def wrap_int(self, value: int) -> int:
        """Wrap a non-negative integer to the configured two's-complement width."""
        value &= (1 << self.int_bits) - 1
        if value > self.int_max:
            value -= 1 << self.int_bits
        return value
