"""
Reference tree-walking evaluator for Radish expressions.

The production execution path compiles the AST to bytecode for the VM; this
evaluator applies the same Value operator contracts directly to the tree. It
is what the command line tool runs, and it gives hosts a way to evaluate an
expression without a VM.

Author: Radish developers
"""

from typing import List, Union

from ..lexer.source import Source
from ..parser.ast_nodes import (
    AST, ASTNode, ASTVisitor, BinaryExpr, Literal, LiteralKind, Op, ParenExpr, UnaryExpr
)
from ..parser.parser import parse_string
from .errors import RadishRuntimeError
from .value import Value


_BINARY_OPERATIONS = {
    Op.ADD: lambda left, right: left + right,
    Op.SUBTRACT: lambda left, right: left - right,
    Op.MULTIPLY: lambda left, right: left * right,
    Op.DIVIDE: lambda left, right: left / right,
}


class Evaluator(ASTVisitor):
    """
    Evaluates an AST to a Value.

    Nodes are visited in post-order and each visit pops its operands from
    a value stack, so evaluation depth does not depend on the Python call
    stack. Operand-type violations propagate as RadishRuntimeError with the
    span of the innermost node whose operator failed.
    """

    def __init__(self):
        self._values: List[Value] = []

    def evaluate(self, ast: AST) -> Value:
        """
        Evaluate every item and return the value of the last one.

        Raises:
            RadishRuntimeError: If an operator is applied outside its domain
            ValueError: If the AST is empty
        """
        if not ast.items:
            raise ValueError("cannot evaluate an empty AST")

        result = Value.nil()
        for item in ast.items:
            result = self.evaluate_node(item)
        return result

    def evaluate_node(self, node: ASTNode) -> Value:
        self._values = []
        for child in node.postorder():
            child.accept(self)
        return self._values.pop()

    def visit_literal(self, node: Literal):
        if node.kind is LiteralKind.BOOL:
            self._values.append(Value.boolean(node.value))
        else:
            self._values.append(Value.number(node.value))

    def visit_paren_expr(self, node: ParenExpr):
        # the inner value is already on the stack
        pass

    def visit_unary_expr(self, node: UnaryExpr):
        operand = self._values.pop()
        try:
            self._values.append(-operand)
        except RadishRuntimeError as e:
            raise e.with_span(node.span)

    def visit_binary_expr(self, node: BinaryExpr):
        right = self._values.pop()
        left = self._values.pop()
        try:
            self._values.append(_BINARY_OPERATIONS[node.op](left, right))
        except RadishRuntimeError as e:
            raise e.with_span(node.span)


def evaluate_string(source: Union[Source, str], filename: str = "<string>") -> Value:
    """
    Convenience function to parse and evaluate a source string.

    Raises:
        LexerError: If the source contains an unexpected character
        ParseError: If parsing fails
        RadishRuntimeError: If evaluation fails
    """
    ast = parse_string(source, filename)
    return Evaluator().evaluate(ast)
