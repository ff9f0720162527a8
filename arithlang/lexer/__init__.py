"""
ArithLang Lexer Package

Implements the lexical analyzer (tokenizer) for ArithLang.

Key Features:
- Integer and decimal numeric literals
- Identifiers and the reserved ``let`` keyword
- Single-character operators and parentheses
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenKind, SourceLocation
from .lexer import Lexer, tokenize, tokenize_file
from .errors import Diagnostic, LexError, LexErrorKind

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenKind",
    "SourceLocation",
    "Diagnostic",
    "LexError",
    "LexErrorKind",
]
