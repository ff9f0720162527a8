"""
ArithLang Recursive Descent Parser

Parses a token list into a Program using one routine per precedence
level. Every binary level loops and folds to the left, so a chain like
``1 - 2 - 3`` never recurses on the same level and always groups as
``(1 - 2) - 3``.

Author: xwest
"""

import logging
import math
from typing import List, Optional

from ..lexer.tokens import (
    Token, TokenKind, SourceLocation, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS
)
from ..lexer.lexer import tokenize, tokenize_file
from .ast_nodes import (
    Program, Stmt, Expression, BinaryExpression, NumberLiteral, Identifier, SourceSpan
)
from .errors import (
    create_unexpected_token_error, create_invalid_number_error,
    create_unclosed_parenthesis_error, create_invalid_statement_error,
    create_nesting_too_deep_error, create_internal_error
)

logger = logging.getLogger(__name__)

# Each parenthesis level costs a few Python frames
DEFAULT_MAX_NESTING = 100


class Parser:
    """
    ArithLang parser.

    Grammar, lowest to highest precedence::

        statement      := expression
        expression     := additive
        additive       := multiplicative ( ('+' | '-') multiplicative )*
        multiplicative := primary ( ('*' | '/' | '%') primary )*
        primary        := NUMBER | IDENTIFIER | '(' expression ')'

    A parser instance can be reused; every ``parse_program`` call starts
    from a fresh token list and cursor.

    Binary chains are parsed with loops, but parentheses recurse, so their
    depth is capped at ``max_depth``.
    """

    def __init__(self, filename: str = "<string>", max_depth: int = DEFAULT_MAX_NESTING):
        """
        Args:
            filename: Name reported in diagnostics
            max_depth: Deepest parenthesis nesting accepted
        """
        self.filename = filename
        self.max_depth = max_depth
        self.tokens: List[Token] = []
        self.current = 0
        self.depth = 0

    def parse_program(self, source: str) -> Program:
        """
        Tokenize and parse a source string.

        Returns:
            Program whose body holds one entry per top-level expression

        Raises:
            LexError: If the source contains an unsupported character
            ParseError: On the first syntax error
        """
        return self.parse_tokens(tokenize(source, self.filename))

    def parse_tokens(self, tokens: List[Token]) -> Program:
        """Parse an already tokenized, EOF-terminated token list."""
        self.tokens = tokens
        self.current = 0
        self.depth = 0

        if not tokens or tokens[-1].kind != TokenKind.EOF:
            location = tokens[-1].location if tokens else SourceLocation(self.filename, 1, 1, 0)
            raise create_internal_error("token stream is not terminated by EOF", location)

        body: List[Stmt] = []
        while not self._at_end():
            body.append(self.parse_statement())

        span = SourceSpan(self.tokens[0].location, self.tokens[-1].location)
        logger.debug("Parsed %d statements from %d tokens", len(body), len(self.tokens))
        return Program(tuple(body), span)

    def parse_statement(self) -> Stmt:
        """Parse a statement. Only expression statements exist."""
        token = self._peek()
        if token.kind in (TokenKind.LET, TokenKind.EQUALS):
            raise create_invalid_statement_error(token)

        return self.parse_expression()

    def parse_expression(self) -> Expression:
        return self._parse_additive()

    def _parse_additive(self) -> Expression:
        """Handles addition and subtraction."""
        left = self._parse_multiplicative()

        while self._check_operator(ADDITIVE_OPERATORS):
            operator = self._advance().text
            right = self._parse_multiplicative()
            left = self._binary(left, right, operator)

        return left

    def _parse_multiplicative(self) -> Expression:
        """Handles multiplication, division and remainder."""
        left = self._parse_primary()

        while self._check_operator(MULTIPLICATIVE_OPERATORS):
            operator = self._advance().text
            right = self._parse_primary()
            left = self._binary(left, right, operator)

        return left

    def _parse_primary(self) -> Expression:
        """
        Handles the highest-precedence forms.

        Raises:
            ParseError: If the token cannot start an expression
        """
        token = self._peek()

        if token.kind == TokenKind.NUMBER:
            return self._parse_number_literal()

        if token.kind == TokenKind.IDENTIFIER:
            self._advance()
            return Identifier(token.text, SourceSpan(token.location, token.location))

        if token.kind == TokenKind.OPEN_PAREN:
            if self.depth >= self.max_depth:
                raise create_nesting_too_deep_error(token, self.max_depth)

            self._advance()
            self.depth += 1
            expr = self.parse_expression()
            self._expect(TokenKind.CLOSE_PAREN, "Expected closing parenthesis",
                         opened_at=token.location)
            self.depth -= 1
            return expr

        raise create_unexpected_token_error(token)

    def _parse_number_literal(self) -> NumberLiteral:
        token = self._advance()

        try:
            value = float(token.text)
        except ValueError:
            raise create_invalid_number_error(token, "Cannot parse numeric literal")

        if not math.isfinite(value):
            raise create_invalid_number_error(token, "Numeric literal is too large to represent")

        return NumberLiteral(value, SourceSpan(token.location, token.location))

    def _binary(self, left: Expression, right: Expression, operator: str) -> BinaryExpression:
        span = None
        if left.span is not None and right.span is not None:
            span = SourceSpan(left.span.start, right.span.end)
        return BinaryExpression(left, right, operator, span)

    # Cursor helpers

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if not self.tokens:
            raise create_internal_error(
                "peek on an empty token stream",
                SourceLocation(self.filename, 1, 1, 0)
            )
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Never step past the EOF sentinel
        return self.tokens[-1]

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if token.kind != TokenKind.EOF:
            self.current += 1
        return token

    def _at_end(self) -> bool:
        return self._peek().kind == TokenKind.EOF

    def _check_operator(self, operators) -> bool:
        token = self._peek()
        return token.kind == TokenKind.BINARY_OPERATOR and token.text in operators

    def _expect(self, kind: TokenKind, message: str,
                opened_at: Optional[SourceLocation] = None) -> Token:
        """Consume the current token, raising if it is not of the expected kind."""
        token = self._advance()

        if token.kind != kind:
            if kind == TokenKind.CLOSE_PAREN:
                raise create_unclosed_parenthesis_error(
                    message, opened_at or token.location, token
                )
            raise create_unexpected_token_error(token, expected=kind.name)

        return token


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        LexError: If lexing fails
        ParseError: If parsing fails
    """
    return Parser(filename).parse_program(source)


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        Program AST

    Raises:
        LexError: If lexing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    tokens = tokenize_file(filepath)
    return Parser(filepath).parse_tokens(tokens)
