"""Runtime values and arithmetic for minilang.

This module defines the values the evaluator produces and the rules for
combining them with the arithmetic operators. Values are small frozen
dataclasses so results compare by value in tests and can be shared
freely between environment bindings.

The arithmetic helpers here raise plain Python exceptions (`TypeError`
for operand kinds that have no rule, `ZeroDivisionError` for integer
division or modulo by zero). The evaluator catches them and raises
minilang errors with the statement index attached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import math

# Bounds used when a float exponent has to be squeezed into an integer.
INT64_MAX = 2 ** 63 - 1
INT64_MIN = -(2 ** 63)


@dataclass(frozen=True)
class VoidVal:
    """The uninitialized sentinel. Literals never evaluate to it."""
    def __repr__(self) -> str:
        return 'Void'


@dataclass(frozen=True)
class IntVal:
    value: int

    def __repr__(self) -> str:
        try:
            return f"Int({self.value!r})"
        except ValueError:
            # past the interpreter's int-to-str digit limit
            return f"Int(<{self.value.bit_length()}-bit integer>)"


@dataclass(frozen=True)
class FloatVal:
    value: float

    def __repr__(self) -> str:
        return f"Float({self.value!r})"


@dataclass(frozen=True)
class StrVal:
    value: str

    def __repr__(self) -> str:
        return f"String({self.value!r})"


Value = Union[VoidVal, IntVal, FloatVal, StrVal]

VOID = VoidVal()


@dataclass
class ErrorVal:
    """Describes an evaluation failure.

    `kind` is one of the names in `minilang.errors` (for example
    'UndefinedVariable'). `statement_index` is the zero-based position of
    the top-level statement being evaluated when the error happened, or
    None if the error was raised outside a program run.
    """
    kind: str
    message: str
    statement_index: Optional[int] = None

    def __repr__(self) -> str:
        return f"Error(kind={self.kind!r}, message={self.message!r}, statement_index={self.statement_index!r})"


def type_name(value: Value) -> str:
    """Return the minilang type name of a runtime value."""
    if isinstance(value, IntVal):
        return 'Int'
    if isinstance(value, FloatVal):
        return 'Float'
    if isinstance(value, StrVal):
        return 'String'
    if isinstance(value, VoidVal):
        return 'Void'
    return type(value).__name__


def to_string(value: Value) -> str:
    """Convert a value to the text shown to users (CLI, REPL).

    Raises ValueError for an Int with more decimal digits than the
    interpreter will convert (`sys.get_int_max_str_digits`).
    """
    if isinstance(value, IntVal):
        return str(value.value)
    if isinstance(value, FloatVal):
        return repr(value.value)
    if isinstance(value, StrVal):
        return value.value
    if isinstance(value, VoidVal):
        return 'void'
    return str(value)


def _int_div(a: int, b: int) -> int:
    # truncating division; Python's // floors
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_rem(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _numeric_pair(op: str, a: Value, b: Value):
    """Return the raw operands, promoting to float when the kinds differ.

    Raises TypeError when either side is not numeric.
    """
    if not isinstance(a, (IntVal, FloatVal)) or not isinstance(b, (IntVal, FloatVal)):
        raise TypeError(f"unsupported {op} for {type_name(a)} and {type_name(b)}")
    if isinstance(a, IntVal) and isinstance(b, IntVal):
        return a.value, b.value, False
    return float(a.value), float(b.value), True


def apply_arith(op: str, a: Value, b: Value) -> Value:
    """Apply one of `+ - * / %` to two values.

    Int with Int stays integral (division truncates toward zero, the
    remainder takes the sign of the dividend). Any Float operand promotes
    the other side to Float and IEEE rules apply, so a float division by
    zero gives an infinity or NaN rather than an error. Strings and Void
    have no arithmetic.
    """
    x, y, is_float = _numeric_pair(op, a, b)
    if op == '+':
        result = x + y
    elif op == '-':
        result = x - y
    elif op == '*':
        result = x * y
    elif op == '/':
        if is_float:
            result = _float_div(x, y)
        else:
            if y == 0:
                raise ZeroDivisionError('division by zero')
            result = _int_div(x, y)
    elif op == '%':
        if is_float:
            result = _float_rem(x, y)
        else:
            if y == 0:
                raise ZeroDivisionError('modulo by zero')
            result = x - y * _int_div(x, y)
    else:
        raise ValueError(f"not an arithmetic operator: {op}")
    return FloatVal(result) if is_float else IntVal(result)


def exponent_of(value: Value) -> int:
    """Coerce the right operand of `^` to an integer exponent.

    Floats are truncated toward zero. NaN becomes 0 and infinities
    saturate to the signed 64-bit range.
    """
    if isinstance(value, IntVal):
        return value.value
    if isinstance(value, FloatVal):
        v = value.value
        if math.isnan(v):
            return 0
        if math.isinf(v):
            return INT64_MAX if v > 0 else INT64_MIN
        return max(INT64_MIN, min(INT64_MAX, math.trunc(v)))
    raise TypeError(f"exponent must be Int or Float, got {type_name(value)}")


def power(base: Value, exponent: int) -> Value:
    """Multiply `Int(1)` by `base` exactly `exponent` times.

    This is not mathematical exponentiation: a zero or negative exponent
    returns Int(1) untouched, and a Float base only turns the result into
    a Float once the first multiplication happens.
    """
    result: Value = IntVal(1)
    for _ in range(exponent):
        result = apply_arith('*', result, base)
    return result
