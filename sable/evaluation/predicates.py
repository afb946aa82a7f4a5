"""Classification and coercion helpers shared by the evaluator and builtins."""

from __future__ import annotations

from sable import LispValue, SExpression
from sable.errors import SableTypeError
from sable.types.nil import EmptyType


def is_true(value: LispValue) -> bool:
    """False for #f and for every null object: (), Empty and None."""
    return value is not False and not is_null_expression(value)


def is_null_expression(expr: SExpression) -> bool:
    """True for every spelling of "no expression": None, (), and Empty."""
    if expr is None or isinstance(expr, EmptyType):
        return True
    return isinstance(expr, list) and not expr


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: LispValue, context: str) -> float:
    """Coerce `value` to the single numeric type or raise SableTypeError."""
    if not is_number(value):
        raise SableTypeError(f"{context}: expected a number, got {value!r}")
    return float(value)

