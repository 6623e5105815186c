"""
Runtime values for the Radish interpreter.

A Value is a closed tagged union of Number, Boolean, String, Function and
Nil. Strings and Functions are shared by reference: copying a Value copies
the handle, not the payload, and Python's reference counting reclaims the
payload when the last Value holding it goes away.

String concatenation mutates the left operand's buffer in place and returns
a Value aliasing that buffer, so every alias observes the result. Hosts that
share Values across threads must serialize access to string buffers.

Author: Radish developers
"""

import functools
import math
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from .errors import create_binary_operand_error, create_unary_operand_error


class ValueType(Enum):
    """Variant tags for Value."""
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    FUNCTION = "function"
    NIL = "nil"


class StringBuffer:
    """Mutable text buffer shared by every String value aliasing it."""

    __slots__ = ("text",)

    def __init__(self, text: str = ""):
        self.text = text

    def append(self, text: str):
        self.text += text

    def __repr__(self) -> str:
        return f"StringBuffer({self.text!r})"


@functools.total_ordering
class Function:
    """
    Immutable function descriptor.

    The compiled body is opaque to the front-end. Equality and ordering
    look at the name only.
    """

    __slots__ = ("_name", "_arity", "_chunk")

    def __init__(self, name: str, arity: int = 0, chunk: Any = None):
        if not 0 <= arity <= 255:
            raise ValueError(f"arity must fit in a byte, got {arity}")
        self._name = name
        self._arity = arity
        self._chunk = chunk

    @property
    def name(self) -> str:
        return self._name

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def chunk(self) -> Any:
        return self._chunk

    def __eq__(self, other) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self._name < other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Function({self._name!r}, arity={self._arity})"


Payload = Union[float, bool, StringBuffer, Function, None]


class Value:
    """
    Dynamically tagged runtime value.

    Build values with the named constructors (``Value.number(1.0)``) or
    ``Value.from_python``. Arithmetic uses the Python operators; logical
    not is ``logical_not()`` because ``not`` cannot return a Value.
    """

    __slots__ = ("type", "_payload")

    def __init__(self, value_type: ValueType, payload: Payload = None):
        self.type = value_type
        self._payload = payload

    # Constructors

    @classmethod
    def number(cls, value: float) -> "Value":
        return cls(ValueType.NUMBER, float(value))

    @classmethod
    def boolean(cls, value: bool) -> "Value":
        return cls(ValueType.BOOLEAN, bool(value))

    @classmethod
    def string(cls, text: Union[str, StringBuffer]) -> "Value":
        """Wrap ``text`` in a new buffer, or alias an existing buffer."""
        if isinstance(text, StringBuffer):
            return cls(ValueType.STRING, text)
        return cls(ValueType.STRING, StringBuffer(text))

    @classmethod
    def function(cls, function: Function) -> "Value":
        return cls(ValueType.FUNCTION, function)

    @classmethod
    def nil(cls) -> "Value":
        return cls(ValueType.NIL)

    @classmethod
    def from_python(cls, obj: Any) -> "Value":
        """
        Convert a host object into a Value.

        bool -> Boolean, int/float -> Number, str -> String,
        Function -> Function, None -> Nil. Values pass through unchanged.

        Raises:
            TypeError: For any other host type
        """
        if isinstance(obj, Value):
            return obj
        # bool first: it is a subclass of int
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, Function):
            return cls.function(obj)
        if obj is None:
            return cls.nil()
        raise TypeError(f"cannot convert {type(obj).__name__} to a Radish value")

    def clone(self) -> "Value":
        """New handle sharing this value's payload."""
        return Value(self.type, self._payload)

    # Accessors

    @property
    def payload(self) -> Payload:
        return self._payload

    @property
    def is_nil(self) -> bool:
        return self.type == ValueType.NIL

    def as_number(self) -> float:
        if self.type != ValueType.NUMBER:
            raise TypeError(f"expected number, found {self.type.value}")
        return self._payload

    def as_boolean(self) -> bool:
        if self.type != ValueType.BOOLEAN:
            raise TypeError(f"expected boolean, found {self.type.value}")
        return self._payload

    def as_string(self) -> str:
        if self.type != ValueType.STRING:
            raise TypeError(f"expected string, found {self.type.value}")
        return self._payload.text

    def as_function(self) -> Function:
        if self.type != ValueType.FUNCTION:
            raise TypeError(f"expected function, found {self.type.value}")
        return self._payload

    def is_truthy(self) -> bool:
        """Nil and false are falsy; everything else is truthy."""
        if self.type == ValueType.NIL:
            return False
        if self.type == ValueType.BOOLEAN:
            return self._payload
        return True

    # Operators

    def __add__(self, other: "Value") -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        if self.type == ValueType.NUMBER and other.type == ValueType.NUMBER:
            return Value(ValueType.NUMBER, self._payload + other._payload)
        if self.type == ValueType.STRING and other.type == ValueType.STRING:
            self._payload.append(other._payload.text)
            return Value(ValueType.STRING, self._payload)
        raise create_binary_operand_error("+", self.type, other.type)

    def __sub__(self, other: "Value") -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._numbers("-", other)
        return Value(ValueType.NUMBER, left - right)

    def __mul__(self, other: "Value") -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._numbers("*", other)
        return Value(ValueType.NUMBER, left * right)

    def __truediv__(self, other: "Value") -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._numbers("/", other)
        return Value(ValueType.NUMBER, _ieee_divide(left, right))

    def __neg__(self) -> "Value":
        if self.type != ValueType.NUMBER:
            raise create_unary_operand_error("-", self.type)
        return Value(ValueType.NUMBER, -self._payload)

    def logical_not(self) -> "Value":
        if self.type != ValueType.BOOLEAN:
            raise create_unary_operand_error("!", self.type)
        return Value(ValueType.BOOLEAN, not self._payload)

    def _numbers(self, operator: str, other: "Value"):
        if self.type != ValueType.NUMBER or other.type != ValueType.NUMBER:
            raise create_binary_operand_error(operator, self.type, other.type)
        return self._payload, other._payload

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.type != other.type:
            return False
        if self.type == ValueType.NIL:
            return True
        if self.type == ValueType.STRING:
            return self._payload.text == other._payload.text
        return self._payload == other._payload

    # String buffers are mutable
    __hash__ = None

    def partial_cmp(self, other: "Value") -> Optional[int]:
        """
        Compare within a variant.

        Returns -1, 0 or 1, or None when the pair is unordered: different
        variants, or a NaN operand.
        """
        if self.type != other.type:
            return None
        if self.type == ValueType.NIL:
            return 0
        if self.type == ValueType.STRING:
            left, right = self._payload.text, other._payload.text
        else:
            left, right = self._payload, other._payload
        if left < right:
            return -1
        if left > right:
            return 1
        if left == right:
            return 0
        return None

    def __lt__(self, other: "Value") -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        ordering = self.partial_cmp(other)
        return ordering is not None and ordering < 0

    def __le__(self, other: "Value") -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        ordering = self.partial_cmp(other)
        return ordering is not None and ordering <= 0

    def __gt__(self, other: "Value") -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        ordering = self.partial_cmp(other)
        return ordering is not None and ordering > 0

    def __ge__(self, other: "Value") -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        ordering = self.partial_cmp(other)
        return ordering is not None and ordering >= 0

    # Display

    def __str__(self) -> str:
        if self.type == ValueType.NUMBER:
            return format_number(self._payload)
        if self.type == ValueType.BOOLEAN:
            return "true" if self._payload else "false"
        if self.type == ValueType.STRING:
            return f'"{self._payload.text}"'
        if self.type == ValueType.FUNCTION:
            return f"<fun {self._payload.name}>"
        return "nil"

    def __repr__(self) -> str:
        if self.type == ValueType.NIL:
            return "Value.nil()"
        if self.type == ValueType.STRING:
            return f"Value.string({self._payload.text!r})"
        return f"Value.{self.type.value}({self._payload!r})"


def _ieee_divide(left: float, right: float) -> float:
    # Python raises on division by zero; Radish follows IEEE 754 instead.
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        sign = math.copysign(1.0, left) * math.copysign(1.0, right)
        return math.copysign(math.inf, sign)
    return left / right


def format_number(number: float) -> str:
    """
    Decimal text for a number: integral values without a fractional part
    and never in exponent notation (``3``, ``2.5``, ``0.0000001``, ``inf``).
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number == 0.0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    if number.is_integer():
        return str(int(number))
    text = repr(number)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    return text
