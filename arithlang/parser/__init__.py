"""
ArithLang Parser Package

Implements a recursive descent parser with explicit precedence levels
for ArithLang, producing an immutable Abstract Syntax Tree.

Key Features:
- Left-associative folding per precedence level (no left recursion)
- Structural equality on AST nodes, with source spans attached
- Canonical source printer and tree printer
- Typed diagnostics for every syntax error

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .printer import SourcePrinter, TreePrinter, to_source, format_tree
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Program", "Stmt", "Expression",
    "NumberLiteral", "Identifier", "BinaryExpression",

    # Printing
    "SourcePrinter", "TreePrinter", "to_source", "format_tree",

    # Error handling
    "ParseError", "ParseErrorKind",
]
