"""
Abstract Syntax Tree node definitions for Radish.

The grammar is expression-only, so the node set is small and closed:
literals, binary and unary arithmetic, and parenthesized groups. Every node
carries the Span it was parsed from and exclusively owns its children; the
link back to the parent is a weak reference, so trees hold no cycles.

Author: Radish developers
"""

import math
import weakref
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterator, List, Optional, Union

from ..lexer.source import Span


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    BINARY_EXPR = "BinaryExpr"
    UNARY_EXPR = "UnaryExpr"
    PAREN_EXPR = "ParenExpr"


class Op(Enum):
    """Arithmetic operators. Unary minus reuses SUBTRACT."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value


class LiteralKind(Enum):
    NUMBER = "number"
    BOOL = "bool"


class ASTVisitor(ABC):
    """
    Visitor interface for traversing AST nodes.

    ``visit`` dispatches to ``visit_literal``, ``visit_binary_expr``,
    ``visit_unary_expr`` or ``visit_paren_expr``.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{_snake_case(node.node_type.value)}", None)
        if method is None:
            return self.generic_visit(node)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        raise NotImplementedError(
            f"{type(self).__name__} has no visitor for {node.node_type.value}"
        )


def _snake_case(name: str) -> str:
    out = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            out.append('_')
        out.append(char.lower())
    return ''.join(out)


class ASTNode(ABC):
    """
    Base class for all AST nodes.

    Traversal, rendering and equality use explicit stacks, so a long
    operator chain never exhausts the Python call stack. The parent link is
    weak: children never keep their parent alive.
    """

    def __init__(self, node_type: ASTNodeType, span: Span):
        self.node_type = node_type
        self.span = span
        self._parent: Optional[weakref.ref] = None

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""

    @abstractmethod
    def _attributes(self) -> tuple:
        """Non-child values that, with the span, define structural equality."""

    @abstractmethod
    def _render(self, operands: List[str]) -> str:
        """Render this node given the rendered text of its children."""

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @property
    def parent(self) -> Optional['ASTNode']:
        """The enclosing node, or None for a root or a node whose tree was dropped."""
        if self._parent is None:
            return None
        return self._parent()

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self._parent = weakref.ref(parent)

    def walk(self) -> Iterator['ASTNode']:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def postorder(self) -> Iterator['ASTNode']:
        """Yield all descendants before their parent, left to right."""
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            children = node.children()
            if expanded or not children:
                yield node
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))

    def sexpr(self) -> str:
        """Render the node as a parenthesized prefix expression."""
        rendered: List[str] = []
        for node in self.postorder():
            count = len(node.children())
            operands = rendered[len(rendered) - count:]
            del rendered[len(rendered) - count:]
            rendered.append(node._render(operands))
        return rendered[0]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if (type(left) is not type(right) or left.span != right.span or
                    left._attributes() != right._attributes()):
                return False
            pending.extend(zip(left.children(), right.children()))
        return True

    __hash__ = None

    def __str__(self) -> str:
        return self.sexpr()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.sexpr()}, span={self.span!r})"


class Literal(ASTNode):
    """Number or boolean literal."""
    value: Union[float, bool]

    def __init__(self, value: Union[float, bool], span: Span):
        super().__init__(ASTNodeType.LITERAL, span)
        self.value = value

    @property
    def kind(self) -> LiteralKind:
        return LiteralKind.BOOL if isinstance(self.value, bool) else LiteralKind.NUMBER

    def children(self) -> List[ASTNode]:
        return []

    def _attributes(self) -> tuple:
        # keeps True from comparing equal to 1.0
        return (self.kind, self.value)

    def _render(self, operands: List[str]) -> str:
        if self.kind is LiteralKind.BOOL:
            return "true" if self.value else "false"
        if math.isfinite(self.value) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


class BinaryExpr(ASTNode):
    """Binary arithmetic expression."""
    left: ASTNode
    op: Op
    right: ASTNode

    def __init__(self, left: ASTNode, op: Op, right: ASTNode, span: Span):
        super().__init__(ASTNodeType.BINARY_EXPR, span)
        self.left = left
        self.op = op
        self.right = right

        left.set_parent(self)
        right.set_parent(self)

    @classmethod
    def spanning(cls, left: ASTNode, op: Op, right: ASTNode) -> 'BinaryExpr':
        """Build the node with the span from the left operand's start to the right's end."""
        return cls(left, op, right, left.span.merge(right.span))

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def _attributes(self) -> tuple:
        return (self.op,)

    def _render(self, operands: List[str]) -> str:
        left, right = operands
        return f"({self.op.symbol} {left} {right})"


class UnaryExpr(ASTNode):
    """Unary negation."""
    op: Op
    operand: ASTNode

    def __init__(self, op: Op, operand: ASTNode, span: Span):
        super().__init__(ASTNodeType.UNARY_EXPR, span)
        self.op = op
        self.operand = operand

        operand.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def _attributes(self) -> tuple:
        return (self.op,)

    def _render(self, operands: List[str]) -> str:
        return f"({self.op.symbol} {operands[0]})"


class ParenExpr(ASTNode):
    """Parenthesized expression; the span includes both delimiters."""
    inner: ASTNode

    def __init__(self, inner: ASTNode, span: Span):
        super().__init__(ASTNodeType.PAREN_EXPR, span)
        self.inner = inner

        inner.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.inner]

    def _attributes(self) -> tuple:
        return ()

    def _render(self, operands: List[str]) -> str:
        return f"(group {operands[0]})"


class AST:
    """Ordered sequence of top-level expressions handed to the compiler."""

    def __init__(self, items: List[ASTNode]):
        self.items = items

    def __eq__(self, other) -> bool:
        if not isinstance(other, AST):
            return NotImplemented
        return self.items == other.items

    __hash__ = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"AST({self.items!r})"
