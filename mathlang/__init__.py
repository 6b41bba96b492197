"""
mathlang

Lexical scanner for the mathlang expression language. The parser, the
statement model and the REPL consume tokens through mathlang.lexer.

Architecture:
    mathlang/
    ├── lexer/           # Tokens, scanner, diagnostics
    └── cli.py           # mathlang-lex token dump

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, ScannerConfig, LexerError, tokenize_string

__all__ = [
    "Scanner",
    "ScannerConfig",
    "LexerError",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
