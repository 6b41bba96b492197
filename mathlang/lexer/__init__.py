"""
mathlang Lexer Package

Implements the lexical scanner for the mathlang expression language.
The scanner is pull based: a parser asks for one token at a time and gets
None at the end of input.

Key Features:
- Four token kinds: Name, Number, StringLiteral, Symbol
- Symbols split runs without surrounding spaces (a+b)
- Quoted strings where symbols are ordinary characters
- Source location tracking for diagnostics
"""

from .tokens import (
    Token, TokenType, SourceLocation, Name, Number, StringLiteral, Symbol,
    DEFAULT_SYMBOLS,
)
from .config import ScannerConfig
from .scanner import Scanner, tokenize_string, tokenize_file
from .errors import LexerError, LexerWarning

__all__ = [
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenType",
    "SourceLocation",
    "Name",
    "Number",
    "StringLiteral",
    "Symbol",
    "DEFAULT_SYMBOLS",
    "LexerError",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
