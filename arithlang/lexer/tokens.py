"""
Token definitions for the ArithLang lexer.

The language only knows a handful of lexemes:
- Numeric literals (digit runs, optionally with a fractional part)
- Identifiers and the reserved keyword ``let``
- Single-character operators and parentheses

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    """
    Enumeration of all token kinds in ArithLang.

    The set is closed: the lexer never produces anything outside it.
    """

    # Literals and names
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # x, total_2

    # Punctuation
    EQUALS = auto()                 # =
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )

    # Operators
    BINARY_OPERATOR = auto()        # + - * / % ^

    # Keywords
    LET = auto()                    # let

    # Special
    EOF = auto()                    # End of input sentinel


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Holds the token kind, the raw text taken from the source and the
    location where the token starts.
    """
    kind: TokenKind
    text: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.location!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.text in KEYWORDS and self.kind == KEYWORDS[self.text]

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary operator."""
        return self.kind == TokenKind.BINARY_OPERATOR


# Lookup tables used by the lexer

KEYWORDS = {
    "let": TokenKind.LET,
}

# Single-character lexemes that map straight to a token kind
SINGLE_CHAR_TOKENS = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "=": TokenKind.EQUALS,
    "+": TokenKind.BINARY_OPERATOR,
    "-": TokenKind.BINARY_OPERATOR,
    "*": TokenKind.BINARY_OPERATOR,
    "/": TokenKind.BINARY_OPERATOR,
    "%": TokenKind.BINARY_OPERATOR,
    "^": TokenKind.BINARY_OPERATOR,
}

WHITESPACE_CHARS = frozenset(" \t\r\n")

# Operators the parser accepts at each precedence level
ADDITIVE_OPERATORS = frozenset({"+", "-"})
MULTIPLICATIVE_OPERATORS = frozenset({"*", "/", "%"})
