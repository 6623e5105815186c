"""
Runtime error handling for Radish values.

Applying an operator outside its operand domain is fatal to the current
evaluation. It is reported as a RadishRuntimeError that the host catches,
never as a process abort.

Author: Radish developers
"""

from typing import Optional, Sequence, TYPE_CHECKING

from ..lexer.source import Span
from ..lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .value import ValueType


class RadishRuntimeError(Exception):
    """
    Exception raised when evaluation cannot continue.

    The span is unknown when the error comes straight from a Value
    operator; the evaluator attaches the span of the failing node.
    """

    def __init__(
        self,
        message: str,
        span: Optional[Span] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.span = span
        self.code = code
        self.help_text = help_text

    def with_span(self, span: Span) -> "RadishRuntimeError":
        """Attach ``span`` unless a more specific one is already set."""
        if self.span is None:
            self.span = span
        return self

    @property
    def diagnostic(self) -> Optional[Diagnostic]:
        if self.span is None:
            return None
        return Diagnostic(
            message=self.message,
            span=self.span,
            severity="error",
            code=self.code,
            help_text=self.help_text,
        )

    def __str__(self) -> str:
        diagnostic = self.diagnostic
        if diagnostic is None:
            return f"ERROR: {self.message}\n"
        return str(diagnostic)


class OperandTypeError(RadishRuntimeError):
    """An operator was applied to operand types outside its domain."""

    def __init__(self, operator: str, operand_types: Sequence["ValueType"],
                 message: str, code: str):
        names = ", ".join(t.value for t in operand_types)
        super().__init__(
            message,
            code=code,
            help_text=f"'{operator}' was applied to ({names}).",
        )
        self.operator = operator
        self.operand_types = tuple(operand_types)


RUNTIME_ERROR_CODES = {
    "R001": "Invalid operand types for binary operator",
    "R002": "Invalid operand type for unary operator",
}


def create_binary_operand_error(operator: str, left: "ValueType",
                                right: "ValueType") -> OperandTypeError:
    if operator == "+":
        message = "Operands must be two numbers or two strings"
    else:
        message = "Operands must be numbers"
    return OperandTypeError(operator, (left, right), message, "R001")


def create_unary_operand_error(operator: str, operand: "ValueType") -> OperandTypeError:
    if operator == "!":
        message = "Operand must be boolean"
    else:
        message = "Operand must be a number"
    return OperandTypeError(operator, (operand,), message, "R002")
