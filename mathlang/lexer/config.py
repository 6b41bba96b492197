"""Scanner configuration."""

from dataclasses import dataclass
from typing import FrozenSet

from .tokens import DECIMAL_POINT, DEFAULT_SYMBOLS, DIGITS, QUOTE, SPACE, STRUCTURAL_CHARS


@dataclass(frozen=True)
class ScannerConfig:
    """
    Options fixed for the lifetime of a Scanner.

    Attributes:
        symbols: Characters that always stand alone as Symbol tokens
        strict_strings: Raise on unterminated quotes instead of warning
        filename: Name used in source locations
    """
    symbols: FrozenSet[str] = DEFAULT_SYMBOLS
    strict_strings: bool = False
    filename: str = "<string>"

    def __post_init__(self):
        # Accept any iterable of characters, store it frozen
        object.__setattr__(self, "symbols", frozenset(self.symbols))
        for char in self.symbols:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Symbols must be single characters, got {char!r}")
            if char in (SPACE, QUOTE) or char in STRUCTURAL_CHARS:
                raise ValueError(f"{char!r} is a delimiter and cannot be a symbol")
            if char.isalpha() or char in DIGITS or char == DECIMAL_POINT:
                raise ValueError(f"{char!r} would split names or numbers and cannot be a symbol")
