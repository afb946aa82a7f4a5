"""Built-in procedures for the Sable runtime environment.

Each builtin is a plain function `fn(env, args)` receiving the caller's
environment and the evaluated arguments; `register` wraps them as Builtin
values in the root frame.
"""
from __future__ import annotations

import math
from typing import Callable

from sable import LispValue
from sable.errors import SableArityError, SableTypeError
from sable.evaluation.evaluator import evaluate
from sable.evaluation.predicates import is_number, is_true, to_number
from sable.printer import display_text
from sable.types.environment import Environment
from sable.types.nil import Empty, EmptyType, Unspecified
from sable.types.pair import Pair, is_list
from sable.types.procedure import Builtin, Procedure
from sable.types.symbol import Quote, Symbol
from sable.types.thunk import Thunk


def _expect(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise SableArityError(f"{name} requires exactly {count} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> float:
    """Return the numeric sum of all arguments."""
    return sum((to_number(x, "+") for x in args), 0.0)


def sub(env: Environment, args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise SableArityError("- requires at least 1 argument")
    first = to_number(args[0], "-")
    if len(args) == 1:
        return -first
    for x in args[1:]:
        first -= to_number(x, "-")
    return first


def mul(env: Environment, args: list[LispValue]) -> float:
    result = 1.0
    for x in args:
        result *= to_number(x, "*")
    return result


def div(env: Environment, args: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise SableArityError("/ requires at least 1 argument")
    numbers = [to_number(x, "/") for x in args]
    if len(numbers) == 1:
        numbers.insert(0, 1.0)
    result = numbers[0]
    for x in numbers[1:]:
        if x == 0:
            raise SableTypeError("/: division by zero")
        result /= x
    return result


def remainder(env: Environment, args: list[LispValue]) -> float:
    _expect("remainder", args, 2)
    n, d = to_number(args[0], "remainder"), to_number(args[1], "remainder")
    if d == 0:
        raise SableTypeError("remainder: division by zero")
    # Sign follows the dividend, as in Scheme
    return math.fmod(n, d)


def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        if len(args) < 2:
            raise SableArityError(f"{name} requires at least 2 arguments")
        numbers = [to_number(x, name) for x in args]
        return all(op(a, b) for a, b in zip(numbers, numbers[1:]))
    return compare


# -------------------------------
# Equality and predicates
# -------------------------------
def logical_not(env: Environment, args: list[LispValue]) -> bool:
    _expect("not", args, 1)
    return not is_true(args[0])


def is_eq(env: Environment, args: list[LispValue]) -> bool:
    """Identity for compound values, value equality for atoms."""
    _expect("eq?", args, 2)
    a, b = args
    if isinstance(a, (Pair, Procedure, Thunk)) or isinstance(b, (Pair, Procedure, Thunk)):
        return a is b
    return type(a) is type(b) and a == b


def is_equal(env: Environment, args: list[LispValue]) -> bool:
    """Structural equality; Pair chains compare element-wise."""
    _expect("equal?", args, 2)
    a, b = args
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not is_equal(env, [a.head, b.head]):
            return False
        a, b = a.tail, b.tail
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    return is_eq(env, [a, b])


def _predicate(name: str, test: Callable[[LispValue], bool]):
    def check(env: Environment, args: list[LispValue]) -> bool:
        _expect(name, args, 1)
        return test(args[0])
    return check


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Pair:
    _expect("cons", args, 2)
    return Pair(args[0], args[1])


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("car", args, 1)
    if not isinstance(args[0], Pair):
        raise SableTypeError(f"car: expected a pair, got {display_text(args[0])}")
    return args[0].head


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("cdr", args, 1)
    if not isinstance(args[0], Pair):
        raise SableTypeError(f"cdr: expected a pair, got {display_text(args[0])}")
    return args[0].tail


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return Pair.from_iterable(args)


def length(env: Environment, args: list[LispValue]) -> float:
    _expect("length", args, 1)
    if not is_list(args[0]):
        raise SableTypeError(f"length: expected a list, got {display_text(args[0])}")
    return float(0 if isinstance(args[0], EmptyType) else len(args[0]))


# -------------------------------
# Promises and output
# -------------------------------
def force(env: Environment, args: list[LispValue]) -> LispValue:
    """(force promise): evaluate a delayed expression once and cache it."""
    _expect("force", args, 1)
    promise = args[0]
    if isinstance(promise, Thunk):
        return promise.force(evaluate)
    return promise


def display(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("display", args, 1)
    print(display_text(args[0]), end="")
    return Unspecified


def newline(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("newline", args, 0)
    print()
    return Unspecified


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "remainder": remainder,
    "=": _comparison("=", lambda a, b: a == b),
    "<": _comparison("<", lambda a, b: a < b),
    ">": _comparison(">", lambda a, b: a > b),
    "<=": _comparison("<=", lambda a, b: a <= b),
    ">=": _comparison(">=", lambda a, b: a >= b),
    "not": logical_not,
    "eq?": is_eq,
    "equal?": is_equal,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "length": length,
    "null?": _predicate("null?", lambda x: isinstance(x, EmptyType)),
    "pair?": _predicate("pair?", lambda x: isinstance(x, Pair)),
    "list?": _predicate("list?", is_list),
    "number?": _predicate("number?", is_number),
    "string?": _predicate("string?", lambda x: isinstance(x, str)),
    "symbol?": _predicate("symbol?", lambda x: isinstance(x, (Quote, Symbol))),
    "boolean?": _predicate("boolean?", lambda x: isinstance(x, bool)),
    "procedure?": _predicate("procedure?", lambda x: isinstance(x, Procedure)),
    "force": force,
    "display": display,
    "newline": newline,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(Symbol("nil"), Empty)
