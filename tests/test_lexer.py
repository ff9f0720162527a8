"""
Test suite for the ArithLang lexer.

Tests cover:
- Numeric, identifier and keyword lexemes
- Single-character operators and punctuation
- Whitespace handling and the EOF sentinel
- Unexpected characters and their diagnostics

Author: xwest
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithlang.lexer.lexer import Lexer, tokenize, tokenize_file
from arithlang.lexer.tokens import TokenKind
from arithlang.lexer.errors import LexError, LexErrorKind, ERROR_CODES


def kinds(source: str):
    return [token.kind for token in tokenize(source)]


def texts(source: str):
    return [token.text for token in tokenize(source)]


class TestLexer(unittest.TestCase):
    """Test cases for tokenization."""

    def test_digit_runs_are_single_number_tokens(self):
        for source in ["0", "7", "42", "007", "1234567890", "9" * 50]:
            with self.subTest(source=source):
                tokens = tokenize(source)
                self.assertEqual(len(tokens), 2)
                self.assertEqual(tokens[0].kind, TokenKind.NUMBER)
                self.assertEqual(tokens[0].text, source)
                self.assertEqual(tokens[1].kind, TokenKind.EOF)

    def test_decimal_literal(self):
        tokens = tokenize("3.14")
        self.assertEqual(tokens[0].kind, TokenKind.NUMBER)
        self.assertEqual(tokens[0].text, "3.14")
        self.assertEqual(len(tokens), 2)

    def test_operators_and_punctuation(self):
        self.assertEqual(
            kinds("(1+2)*3"),
            [
                TokenKind.OPEN_PAREN, TokenKind.NUMBER, TokenKind.BINARY_OPERATOR,
                TokenKind.NUMBER, TokenKind.CLOSE_PAREN, TokenKind.BINARY_OPERATOR,
                TokenKind.NUMBER, TokenKind.EOF,
            ]
        )

    def test_every_operator_is_a_binary_operator_token(self):
        for op in "+-*/%^":
            with self.subTest(op=op):
                tokens = tokenize(op)
                self.assertEqual(tokens[0].kind, TokenKind.BINARY_OPERATOR)
                self.assertEqual(tokens[0].text, op)
                self.assertTrue(tokens[0].is_operator)

    def test_let_statement_tokens(self):
        self.assertEqual(
            kinds("let x = 5"),
            [TokenKind.LET, TokenKind.IDENTIFIER, TokenKind.EQUALS, TokenKind.NUMBER, TokenKind.EOF]
        )
        self.assertTrue(tokenize("let")[0].is_keyword)

    def test_keyword_prefix_is_identifier(self):
        for source in ["lets", "letter", "Let", "_let"]:
            with self.subTest(source=source):
                tokens = tokenize(source)
                self.assertEqual(tokens[0].kind, TokenKind.IDENTIFIER)
                self.assertEqual(tokens[0].text, source)
                self.assertFalse(tokens[0].is_keyword)

    def test_identifier_characters(self):
        self.assertEqual(texts("x1_y _tmp café"), ["x1_y", "_tmp", "café", ""])

    def test_number_then_identifier(self):
        self.assertEqual(kinds("2x"), [TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.EOF])
        self.assertEqual(texts("2x"), ["2", "x", ""])

    def test_whitespace_is_skipped(self):
        self.assertEqual(texts(" \t1 \r\n+\n 2 "), ["1", "+", "2", ""])

    def test_empty_and_whitespace_input(self):
        for source in ["", "   ", "\n\t\r\n"]:
            with self.subTest(source=source):
                tokens = tokenize(source)
                self.assertEqual(len(tokens), 1)
                self.assertEqual(tokens[0].kind, TokenKind.EOF)
                self.assertEqual(tokens[0].text, "")

    def test_supported_alphabet_never_fails(self):
        source = "abc XYZ 0123456789 ()+-*/%= \t\r\n let z9 = (a % 4) / 2"
        tokens = tokenize(source)
        self.assertEqual(tokens[-1].kind, TokenKind.EOF)
        self.assertEqual(sum(1 for t in tokens if t.kind == TokenKind.EOF), 1)

    def test_only_eof_has_empty_text(self):
        for token in tokenize("let a = (1 + 22) * b3 % 4 ^ 5")[:-1]:
            self.assertNotEqual(token.text, "")

    def test_unexpected_characters(self):
        for char in ["$", "#", ",", "&", "[", "!", "\"", "²", "@", ";"]:
            with self.subTest(char=char):
                with self.assertRaises(LexError) as ctx:
                    tokenize(f"1 + {char}")
                self.assertEqual(ctx.exception.kind, LexErrorKind.UNEXPECTED_CHARACTER)
                self.assertEqual(ctx.exception.char, char)

    def test_dangling_decimal_points(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("3.")
        self.assertEqual(ctx.exception.char, ".")
        self.assertEqual(ctx.exception.location.column, 2)

        with self.assertRaises(LexError) as ctx:
            tokenize(".5")
        self.assertEqual(ctx.exception.location.column, 1)

        with self.assertRaises(LexError):
            tokenize("1.2.3")

    def test_error_message_and_code(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("x $ y")
        message = str(ctx.exception)
        self.assertIn("Unexpected character: '$'", message)
        self.assertIn("<string>:1:3", message)
        self.assertEqual(ctx.exception.diagnostic.code, "L001")
        self.assertIn("ERROR[L001]", message)

    def test_every_error_kind_has_a_registered_code(self):
        for kind in LexErrorKind:
            self.assertIn(kind.value, ERROR_CODES)

    def test_error_suggests_ascii_operator(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("2 × 3")
        self.assertEqual(ctx.exception.diagnostic.suggestions, ["*"])

    def test_locations_track_lines_and_columns(self):
        tokens = Lexer("1 +\n  foo", "calc.ar").tokenize()
        foo = tokens[2]
        self.assertEqual(foo.text, "foo")
        self.assertEqual(foo.location.filename, "calc.ar")
        self.assertEqual(foo.location.line, 2)
        self.assertEqual(foo.location.column, 3)
        self.assertEqual(foo.location.offset, 6)
        self.assertEqual(str(foo.location), "calc.ar:2:3")

    def test_lexer_can_be_rerun(self):
        lexer = Lexer("1 + 2")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual([t.text for t in first], [t.text for t in second])
        self.assertEqual(len(second), 4)

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".ar", delete=False, encoding="utf-8") as f:
            f.write("a * 2\n")
            path = f.name
        try:
            tokens = tokenize_file(path)
        finally:
            os.unlink(path)

        self.assertEqual([t.text for t in tokens], ["a", "*", "2", ""])
        self.assertEqual(tokens[0].location.filename, path)


if __name__ == '__main__':
    unittest.main(verbosity=2)
