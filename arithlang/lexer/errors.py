"""
Error handling for the ArithLang lexer.

Provides error reporting with source location information and
human-readable diagnostics.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, SINGLE_CHAR_TOKENS


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
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


class LexErrorKind(Enum):
    """Reasons the lexer can fail."""
    UNEXPECTED_CHARACTER = "L001"


class LexError(Exception):
    """
    Exception raised when the lexer meets a character it cannot tokenize.

    Lexing stops at the first error; ``char`` and ``location`` identify
    the offending input.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        message: str,
        location: SourceLocation,
        char: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.char = char
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.value,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
}


def suggest_alternatives(char: str) -> List[str]:
    """Suggest supported symbols for characters that are commonly confused with them."""
    alternatives = {
        '×': ['*'],
        '÷': ['/'],
        '−': ['-'],
        '[': ['('],
        ']': [')'],
        '{': ['('],
        '}': [')'],
    }

    return [alt for alt in alternatives.get(char, []) if alt in SINGLE_CHAR_TOKENS]


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexError:
    """Create an error for a character outside the language's alphabet."""
    suggestions = suggest_alternatives(char)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char == '.':
        help_text = "A decimal point must sit between digits, as in 3.14."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in ArithLang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexError(
        kind=LexErrorKind.UNEXPECTED_CHARACTER,
        message=f"Unexpected character: '{char}'",
        location=location,
        char=char,
        help_text=help_text,
        suggestions=suggestions
    )
