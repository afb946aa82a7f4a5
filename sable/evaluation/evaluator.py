"""Core evaluator and trampoline for the Sable interpreter.

`evaluate` is a loop over a mutable (expr, env) pair. Special forms and
closure application hand back a TailCall instead of recursing, and the loop
continues with the carried pair. Python recursion is used only for
sub-expressions that are never in tail position: operator, operands and
test expressions.
"""

from __future__ import annotations

from sable import SExpression, LispValue
from sable.evaluation.apply import apply_procedure
from sable.evaluation.predicates import is_null_expression
from sable.evaluation.special_forms import SPECIAL_FORMS
from sable.types.environment import Environment
from sable.types.nil import Empty, UnspecifiedType
from sable.types.symbol import Symbol
from sable.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: returns a value, never a TailCall.
    """
    while True:
        if is_null_expression(expr):
            return Empty

        match expr:
            case UnspecifiedType():
                return expr
            case bool():
                return expr
            case int() | float():
                return float(expr)
            case str():
                return expr
            case Symbol():
                return env.lookup(expr)
            case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head](tail, env, evaluate)
            case [operator, *operands]:
                fn = evaluate(operator, env)
                args = [evaluate(operand, env) for operand in operands]
                result = apply_procedure(fn, args, env)
            case _:
                # Quote atoms, pairs, procedures and promises evaluate to themselves
                return expr

        if isinstance(result, TailCall):
            expr, env = result.expr, result.env
            continue
        return result
