"""
Token definitions for the mathlang scanner.

The token set is closed and small:
- Name (identifiers such as ``x`` or ``total``)
- Number (numeric literals, always held as a float)
- StringLiteral (quoted text, or any run that is neither a number nor a name)
- Symbol (a single character, normally one of ``= + - ;``)

Each variant is a frozen dataclass so tokens can be compared and hashed.
Consumers dispatch on the concrete class or on ``token.type``.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Optional, Union


class TokenType(Enum):
    """Tag shared by every token variant."""

    NAME = auto()                   # x, total
    NUMBER = auto()                 # 42, -3.5, 0.25
    STRING = auto()                 # "hello world", 1.2.3
    SYMBOL = auto()                 # = + - ;


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for the CLI token dump.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Name:
    """An unquoted run starting with a letter."""
    identifier: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    type: ClassVar[TokenType] = TokenType.NAME

    @property
    def value(self) -> str:
        return self.identifier

    @property
    def lexeme(self) -> str:
        return self.identifier

    def __str__(self) -> str:
        return f"NAME({self.identifier!r})"


@dataclass(frozen=True)
class Number:
    """A numeric literal. Integers are held as floats too."""
    value: float
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    type: ClassVar[TokenType] = TokenType.NUMBER

    @property
    def lexeme(self) -> str:
        return repr(self.value)

    def __str__(self) -> str:
        return f"NUMBER({self.value!r})"


@dataclass(frozen=True)
class StringLiteral:
    """Text between a pair of double quotes, quotes stripped."""
    text: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    type: ClassVar[TokenType] = TokenType.STRING

    @property
    def value(self) -> str:
        return self.text

    @property
    def lexeme(self) -> str:
        return self.text

    def __str__(self) -> str:
        return f"STRING({self.text!r})"


@dataclass(frozen=True)
class Symbol:
    """Exactly one character."""
    char: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    type: ClassVar[TokenType] = TokenType.SYMBOL

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"Symbol must be a single character, got {self.char!r}")

    @property
    def value(self) -> str:
        return self.char

    @property
    def lexeme(self) -> str:
        return self.char

    def __str__(self) -> str:
        return f"SYMBOL({self.char!r})"


Token = Union[Name, Number, StringLiteral, Symbol]


# Characters that can never be part of a Name or Number run
DEFAULT_SYMBOLS: FrozenSet[str] = frozenset({'=', '+', '-', ';'})

# Characters that end a bare run and contribute nothing to it
STRUCTURAL_CHARS: FrozenSet[str] = frozenset({'\n', '\t', '\r'})

QUOTE = '"'
SPACE = ' '
NEWLINE = '\n'
SIGN = '-'
DECIMAL_POINT = '.'
DIGITS = frozenset('0123456789')
