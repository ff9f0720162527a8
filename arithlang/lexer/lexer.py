"""
ArithLang Lexer - turns source text into a list of tokens

Single left-to-right scan, no backtracking. Stops at the first
character it does not understand.

xwest
"""

import logging
from typing import List

from .tokens import (
    Token, TokenKind, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, WHITESPACE_CHARS
)
from .errors import create_unexpected_character_error

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Lexer:
    """
    ArithLang lexical analyzer.

    Converts source code text into tokens: numbers, identifiers, the
    ``let`` keyword, single-character operators and parentheses. The
    returned list always ends with an EOF token.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token

        Raises:
            LexError: On the first character that belongs to no token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char in WHITESPACE_CHARS:
                self._advance()
                continue

            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenKind.EOF, "", self._location()))

        logger.debug("Tokenized %s into %d tokens", self.filename, len(self.tokens))
        return self.tokens

    def _next_token(self) -> Token:
        """Read the token starting at the current position."""
        location = self._location()
        current_char = self.source[self.pos]

        # Parentheses, operators and '='
        token_kind = SINGLE_CHAR_TOKENS.get(current_char)
        if token_kind is not None:
            self._advance()
            return Token(token_kind, current_char, location)

        if _is_digit(current_char):
            return self._tokenize_number(location)

        if _is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a digit run, with an optional fractional part."""
        start_pos = self.pos

        while self.pos < len(self.source) and _is_digit(self.source[self.pos]):
            self._advance()

        # Only take the dot when a digit follows it
        if self._current() == '.' and _is_digit(self._peek()):
            self._advance()
            while self.pos < len(self.source) and _is_digit(self.source[self.pos]):
                self._advance()

        return Token(TokenKind.NUMBER, self.source[start_pos:self.pos], location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize an identifier or keyword."""
        start_pos = self.pos

        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and _is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_kind = KEYWORDS.get(lexeme, TokenKind.IDENTIFIER)

        return Token(token_kind, lexeme, location)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts superscripts like '²'
    return len(char) == 1 and char in DIGITS


def _is_identifier_start(char: str) -> bool:
    """Check if character can start an identifier."""
    return char.isalpha() or char == '_'


def _is_identifier_continue(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char.isalpha() or _is_digit(char) or char == '_'


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF

    Raises:
        LexError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath)
