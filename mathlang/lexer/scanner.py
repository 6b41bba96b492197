"""
mathlang Scanner - turns a complete source string into tokens on demand

The scanner is pull based: the parser calls next_token() until it gets None.
Runs are split on spaces and structural characters (newline, tab, CR), and
symbol characters break a run without being merged into it, so ``a+b`` needs
no spaces.
"""

import logging
from typing import Iterator, List, Optional

from .config import ScannerConfig
from .tokens import (
    Token, Name, Number, StringLiteral, Symbol, SourceLocation,
    DECIMAL_POINT, DIGITS, NEWLINE, QUOTE, SIGN, SPACE, STRUCTURAL_CHARS
)
from .errors import (
    LexerWarning, create_invalid_number_error,
    create_unterminated_string_error, create_unterminated_string_warning
)

logger = logging.getLogger(__name__)


class Scanner:
    """
    mathlang lexical scanner.

    Holds the whole source and a cursor. Each call to next_token() returns
    exactly one token, or None once the input is exhausted. The cursor only
    moves forward and never passes len(source).

    Not thread safe; one scanner serves one consumer.
    """

    def __init__(
        self,
        source: str,
        config: Optional[ScannerConfig] = None,
        filename: Optional[str] = None
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text (0 or more lines)
            config: Scanner options, defaults to ScannerConfig()
            filename: Name of source for locations, overrides config.filename
        """
        self.source = source
        self.config = config or ScannerConfig()
        self.filename = filename or self.config.filename
        self.symbols = self.config.symbols
        self.pos = 0
        self.line = 1
        self.column = 1
        self.warnings: List[LexerWarning] = []

    def has_more(self) -> bool:
        """True while the cursor has not reached the end of the source."""
        return self.pos < len(self.source)

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next token, or None at end of input (repeatedly)

        Raises:
            LexerError: If the next run cannot form a token
        """
        while self.has_more():
            self._skip_spaces()
            if not self.has_more():
                break

            location = self._location()
            if self.source[self.pos] == QUOTE:
                self._advance()  # Skip opening quote
                run = self._read_quoted_run(location)
                quoted = True
            else:
                run = self._read_bare_run()
                quoted = False

            # Structural characters and "" produce empty runs
            if not run:
                logger.debug("Discarded empty run at %s", location)
                continue

            token = self._classify(run, quoted, location)
            logger.debug("Scanned %s at %s", token, location)
            return token

        return None

    def tokenize(self) -> List[Token]:
        """Scan all remaining tokens."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def _read_bare_run(self) -> str:
        """
        Read a run outside quotes.

        Stops at a space or structural character, consuming it. A symbol
        ends a non-empty run and is left for the next call; a leading symbol
        is a run of its own. Leading dashes followed by a digit, point or
        another dash form a sign prefix and stay in the run, unless the
        first dash directly follows a name, number or string.
        """
        chars = []

        while self.has_more():
            char = self.source[self.pos]
            if char == SPACE or char in STRUCTURAL_CHARS:
                break

            if char in self.symbols:
                if char == SIGN and self._continues_sign_prefix(chars):
                    chars.append(char)
                    self._advance()
                    continue
                if chars:
                    return ''.join(chars)
                chars.append(char)
                break

            chars.append(char)
            self._advance()

        self._advance()  # Consume the terminator or the leading symbol
        return ''.join(chars)

    def _continues_sign_prefix(self, chars: List[str]) -> bool:
        if not chars:
            if not self._starts_fresh_token():
                return False
            following = self._peek()
            return following in DIGITS or following in (DECIMAL_POINT, SIGN)
        # Only dashes are ever appended through here, so the last one tells
        return chars[-1] == SIGN

    def _starts_fresh_token(self) -> bool:
        """A dash right after a name or number is subtraction, not a sign."""
        if self.pos == 0:
            return True
        previous = self.source[self.pos - 1]
        return previous == SPACE or previous in STRUCTURAL_CHARS or previous in self.symbols

    def _read_quoted_run(self, location: SourceLocation) -> str:
        """Read up to the closing quote; symbols are ordinary characters here."""
        chars = []

        while self.has_more():
            char = self.source[self.pos]
            if char == QUOTE or char == NEWLINE:
                break
            chars.append(char)
            self._advance()

        text = ''.join(chars)
        terminated = self.has_more() and self.source[self.pos] == QUOTE
        self._advance()  # Skip closing quote (or the newline)

        if not terminated:
            if self.config.strict_strings:
                raise create_unterminated_string_error(text, location)
            warning = create_unterminated_string_warning(text, location)
            self.warnings.append(warning)
            logger.warning("Unterminated string literal at %s", location)

        return text

    def _classify(self, run: str, quoted: bool, location: SourceLocation) -> Token:
        """Turn a non-empty run into a token; first match wins."""
        if quoted:
            return StringLiteral(run, location)

        if is_number(run):
            return Number(self._parse_number(run, location), location)

        if run[0].isalpha():
            return Name(run, location)

        if len(run) == 1:
            return Symbol(run, location)

        return StringLiteral(run, location)

    def _parse_number(self, run: str, location: SourceLocation) -> float:
        if not any(c in DIGITS for c in run):
            raise create_invalid_number_error(
                run, location, "A numeric literal needs at least one digit."
            )
        return float(run)

    def _skip_spaces(self):
        """Skip literal spaces only; tabs and newlines end runs instead."""
        while self.has_more() and self.source[self.pos] == SPACE:
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == NEWLINE:
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_warnings(self) -> bool:
        """Check if scanner recorded any warnings."""
        return len(self.warnings) > 0


def is_number(run: str) -> bool:
    """
    Check a whole run against the number grammar.

    Every character must be a digit, the first '.', or a '-' at position 0
    of a run longer than one character. ``1.2.3`` and ``-`` are not numbers.
    """
    decimal_seen = False
    for index, char in enumerate(run):
        if char in DIGITS:
            continue
        if char == DECIMAL_POINT and not decimal_seen:
            decimal_seen = True
            continue
        if char == SIGN and index == 0 and len(run) > 1:
            continue
        return False
    return len(run) != 0


def tokenize_string(
    source: str,
    filename: Optional[str] = None,
    config: Optional[ScannerConfig] = None
) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Scanner options

    Returns:
        List of tokens (no end marker)

    Raises:
        LexerError: If scanning fails
    """
    return Scanner(source, config, filename).tokenize()


def tokenize_file(filepath: str, config: Optional[ScannerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Scanner options

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath), config)
