"""
ArithLang Front End Package

Tokenizer and recursive descent parser for a small arithmetic
expression language.

Architecture:
    arithlang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis, AST and printers
    └── repl.py          # Interactive driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, LexError, tokenize, tokenize_file
from .parser import (
    Parser, ParseError, Program, Stmt, Expression, NumberLiteral, Identifier,
    BinaryExpression, parse_string, parse_file, to_source, format_tree
)

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",

    # Entry points
    "tokenize",
    "tokenize_file",
    "parse_string",
    "parse_file",
    "to_source",
    "format_tree",

    # AST
    "Program",
    "Stmt",
    "Expression",
    "NumberLiteral",
    "Identifier",
    "BinaryExpression",

    # Errors
    "LexError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
