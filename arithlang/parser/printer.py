"""
AST printers.

SourcePrinter renders canonical source text with the minimum parentheses
needed to parse back to an equal tree. TreePrinter renders an indented
outline for the REPL.

Author: xwest
"""

from decimal import Decimal
from typing import List, Tuple, Union

from ..lexer.tokens import ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS
from .ast_nodes import ASTNode, ASTVisitor, BinaryExpression, Identifier, NumberLiteral, Program


PRECEDENCE = {op: 1 for op in ADDITIVE_OPERATORS}
PRECEDENCE.update({op: 2 for op in MULTIPLICATIVE_OPERATORS})


def format_number(value: float) -> str:
    """Positional text for a float, e.g. 1e-05 -> '0.00001', 4.0 -> '4'."""
    text = format(Decimal(repr(value)), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


class SourcePrinter(ASTVisitor):
    """
    Renders an AST back to ArithLang source.

    Parentheses are emitted only where precedence or left associativity
    requires them, so ``1 - 2 - 3`` prints unchanged and ``1 - (2 - 3)``
    keeps its group.
    """

    def visit_Program(self, node: Program) -> str:
        return "\n".join(stmt.accept(self) for stmt in node.body)

    def visit_NumberLiteral(self, node: NumberLiteral) -> str:
        return format_number(node.value)

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        # Explicit stack: parsed chains can nest far deeper than the recursion limit
        parts: List[str] = []
        stack: List[Union[str, ASTNode]] = [node]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, BinaryExpression):
                level = PRECEDENCE[item.operator]
                stack.extend(self._operand(item.right, level, is_right=True))
                stack.append(f" {item.operator} ")
                stack.extend(self._operand(item.left, level, is_right=False))
            else:
                parts.append(item.accept(self))
        return "".join(parts)

    @staticmethod
    def _operand(child: ASTNode, parent_level: int, is_right: bool) -> List[Union[str, ASTNode]]:
        """Stack entries for one operand, pushed last part first."""
        if isinstance(child, BinaryExpression):
            level = PRECEDENCE[child.operator]
            if level < parent_level or (is_right and level == parent_level):
                return [")", child, "("]
        return [child]


class TreePrinter(ASTVisitor):
    """
    Renders an AST as an indented outline, one node per line.

    Each ``visit_*`` method returns the label for a single node; ``render``
    walks the tree with an explicit stack and indents each label by depth.
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def render(self, node: ASTNode) -> str:
        lines: List[str] = []
        stack: List[Tuple[ASTNode, int]] = [(node, 0)]
        while stack:
            current, depth = stack.pop()
            lines.append(f"{self.indent * depth}{current.accept(self)}")
            stack.extend((child, depth + 1) for child in reversed(current.children()))
        return "\n".join(lines)

    def visit_Program(self, node: Program) -> str:
        return f"Program ({len(node.body)} statements)"

    def visit_NumberLiteral(self, node: NumberLiteral) -> str:
        return f"NumberLiteral {format_number(node.value)}"

    def visit_Identifier(self, node: Identifier) -> str:
        return f"Identifier {node.name}"

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        return f"BinaryExpression '{node.operator}'"


def to_source(node: ASTNode) -> str:
    """Render canonical source text for an AST."""
    return node.accept(SourcePrinter())


def format_tree(node: ASTNode, indent: str = "  ") -> str:
    """Render an indented outline of an AST."""
    return TreePrinter(indent).render(node)
