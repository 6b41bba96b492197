"""
Error handling for the mathlang scanner.

Any LexerError aborts the whole scan; there is no resynchronization.
LexerWarning is only collected, never raised.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for scanner diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when no token can be formed from the remaining input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a scanner warning that doesn't stop the scan.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
}


def create_unterminated_string_error(text: str, location: SourceLocation) -> LexerError:
    """Create an error for a quoted run with no closing quote on its line."""
    return LexerError(
        message=f"Unterminated string literal: \"{text}",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching \" on the same line.",
        suggestions=["Add a closing \" quote"]
    )


def create_unterminated_string_warning(text: str, location: SourceLocation) -> LexerWarning:
    """Lenient counterpart of create_unterminated_string_error."""
    return LexerWarning(
        message=f"Unterminated string literal: \"{text}",
        location=location,
        code="L002",
        help_text="The text up to the end of the line was taken as the string."
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for an invalid numeric literal."""
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        suggestions=["Numbers need at least one digit, e.g. 0.5 or -1"]
    )
