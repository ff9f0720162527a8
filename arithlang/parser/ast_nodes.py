"""
Abstract Syntax Tree node definitions for ArithLang.

The node set is closed: a Program holding statements, and the three
expression forms the grammar produces. Nodes are immutable and compare
structurally; source spans are carried along but ignored by equality.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import SourceLocation, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS


BINARY_OPERATORS = ADDITIVE_OPERATORS | MULTIPLICATIVE_OPERATORS


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    PROGRAM = "Program"
    NUMBER_LITERAL = "NumberLiteral"
    IDENTIFIER = "Identifier"
    BINARY_EXPRESSION = "BinaryExpression"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor:
    """
    Visitor over AST nodes.

    ``visit`` dispatches to ``visit_<NodeType>`` (e.g. ``visit_BinaryExpression``)
    and falls back to ``generic_visit``.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{node.node_type.value}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        raise NotImplementedError(
            f"{self.__class__.__name__} has no visitor for {node.node_type.value}"
        )


class ASTNode(ABC):
    """Base class for all AST nodes."""
    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""

    def attributes(self) -> Tuple[Any, ...]:
        """Non-node fields that take part in equality."""
        return ()

    def walk(self):
        """Yield this node and all of its descendants, pre-order."""
        # Left-deep chains can be thousands of levels deep, so no recursion here
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def __eq__(self, other) -> bool:
        """Structural equality; spans are ignored."""
        if not isinstance(other, ASTNode):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left.__class__ is not right.__class__ or left.attributes() != right.attributes():
                return False
            left_children = left.children()
            right_children = right.children()
            if len(left_children) != len(right_children):
                return False
            pending.extend(zip(left_children, right_children))

        return True

    def __hash__(self) -> int:
        return hash(tuple((node.__class__, node.attributes()) for node in self.walk()))


class Stmt(ASTNode):
    """Base class for anything that can appear in a program body."""


class Expression(Stmt):
    """Base class for statements that produce a value."""


# ============================================================================
# Top-level node
# ============================================================================

@dataclass(frozen=True, eq=False)
class Program(ASTNode):
    """Root AST node representing a complete program."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    body: Tuple[Stmt, ...] = ()
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        # Accept any iterable, store a tuple
        object.__setattr__(self, "body", tuple(self.body))

    def children(self) -> List[ASTNode]:
        return list(self.body)


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True, eq=False)
class NumberLiteral(Expression):
    """Numeric constant in source."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.NUMBER_LITERAL

    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def attributes(self) -> Tuple[Any, ...]:
        return (self.value,)

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True, eq=False)
class Identifier(Expression):
    """User-defined variable or symbol in source."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    name: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def attributes(self) -> Tuple[Any, ...]:
        return (self.name,)

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True, eq=False)
class BinaryExpression(Expression):
    """
    An operation with two sides separated by an operator.

    Both sides can be any expression. Supported operators: +, -, *, /, %
    """
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_EXPRESSION

    left: Expression
    right: Expression
    operator: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.operator not in BINARY_OPERATORS:
            raise ValueError(f"Unsupported binary operator: {self.operator!r}")

    def attributes(self) -> Tuple[Any, ...]:
        return (self.operator,)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


# Alias for the main AST type
AST = Program
