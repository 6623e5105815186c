"""
Radish Runtime Package

The dynamically tagged Value type consumed by the execution engine, its
operator contracts, and a reference evaluator over the AST.

Author: Radish developers
"""

from .value import Value, ValueType, StringBuffer, Function, format_number
from .errors import RadishRuntimeError, OperandTypeError
from .evaluator import Evaluator, evaluate_string

__all__ = [
    # Values
    "Value", "ValueType", "StringBuffer", "Function", "format_number",

    # Evaluation
    "Evaluator", "evaluate_string",

    # Error handling
    "RadishRuntimeError", "OperandTypeError",
]
