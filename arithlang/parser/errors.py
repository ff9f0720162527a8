"""
Error handling for the ArithLang parser.

Every syntax error is fatal to the current parse. Errors carry a
ParseErrorKind, the offending token and a Diagnostic for display.

Author: xwest
"""

from enum import Enum
from typing import Optional, List

from ..lexer.tokens import Token, TokenKind, SourceLocation
from ..lexer.errors import Diagnostic


class ParseErrorKind(Enum):
    """Reasons the parser can fail, with their diagnostic codes."""
    UNEXPECTED_TOKEN = "P001"
    INVALID_NUMBER = "P003"
    UNCLOSED_PARENTHESIS = "P004"
    INVALID_STATEMENT = "P005"
    NESTING_TOO_DEEP = "P006"
    INTERNAL = "P999"


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.token = token
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


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P003": "Invalid numeric literal",
    "P004": "Unclosed parenthesis",
    "P005": "Invalid statement",
    "P006": "Parentheses nested too deeply",
    "P999": "Internal parser error",
}


def describe_token(token: Token) -> str:
    """Short human-readable description of a token for messages."""
    if token.kind == TokenKind.EOF:
        return "end of input"
    return f"{token.kind.name} '{token.text}'"


# Helper functions for creating common parser errors

def create_unexpected_token_error(found: Token, expected: str = "an expression") -> ParseError:
    """Create an error for a token that cannot start the rule being parsed."""
    found_str = describe_token(found)

    suggestions = []
    if found.kind == TokenKind.BINARY_OPERATOR:
        if found.text == "^":
            suggestions.append("Exponentiation is not supported; use repeated '*'")
        else:
            suggestions.append(f"Add an operand before '{found.text}'")

    return ParseError(
        kind=ParseErrorKind.UNEXPECTED_TOKEN,
        message=f"Unexpected token {found_str}, expected {expected}",
        location=found.location,
        token=found,
        help_text=f"The parser expected {expected} at this position, but found {found_str} instead.",
        suggestions=suggestions
    )


def create_invalid_number_error(token: Token, reason: str) -> ParseError:
    """Create an error for a numeric literal that does not convert to a finite float."""
    return ParseError(
        kind=ParseErrorKind.INVALID_NUMBER,
        message=f"Invalid numeric literal: '{token.text}'",
        location=token.location,
        token=token,
        help_text=reason
    )


def create_unclosed_parenthesis_error(message: str, open_location: SourceLocation,
                                      found: Token) -> ParseError:
    """Create an error for an '(' whose matching ')' never arrived."""
    return ParseError(
        kind=ParseErrorKind.UNCLOSED_PARENTHESIS,
        message=f"{message}, found {describe_token(found)}",
        location=found.location,
        token=found,
        help_text=f"The opening '(' at {open_location} was never closed.",
        suggestions=["Add a closing ')'"]
    )


def create_invalid_statement_error(found: Token) -> ParseError:
    """Create an error for a statement form the grammar does not support."""
    if found.kind == TokenKind.LET:
        help_text = "Variable declarations are not supported; only expressions can be parsed."
    else:
        help_text = "Assignments are not supported; only expressions can be parsed."

    return ParseError(
        kind=ParseErrorKind.INVALID_STATEMENT,
        message=f"Invalid statement starting with {describe_token(found)}",
        location=found.location,
        token=found,
        help_text=help_text
    )


def create_nesting_too_deep_error(found: Token, max_depth: int) -> ParseError:
    """Create an error for an '(' that exceeds the parser's nesting limit."""
    return ParseError(
        kind=ParseErrorKind.NESTING_TOO_DEEP,
        message=f"Parentheses nested more than {max_depth} levels deep",
        location=found.location,
        token=found,
        help_text="Split the expression or remove redundant parentheses."
    )


def create_internal_error(message: str, location: SourceLocation) -> ParseError:
    """Create an error for a broken parser invariant."""
    return ParseError(
        kind=ParseErrorKind.INTERNAL,
        message=f"Internal parser error: {message}",
        location=location
    )
