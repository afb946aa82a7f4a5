"""cond, rewritten into nested if expressions when it is evaluated."""

from sable import EvaluatorFn
from sable import SExpression
from sable.errors import SableSyntaxError
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.symbol import Symbol
from sable.types.tail_call import TailCall

IF = Symbol("if")
BEGIN = Symbol("begin")
ELSE = Symbol("else")


def sequence_to_expr(body: list[SExpression]) -> SExpression:
    """A single expression stays as is; several are wrapped in begin."""
    if len(body) == 1:
        return body[0]
    return [BEGIN, *body]


def expand_cond(clauses: list[SExpression]) -> SExpression:
    """Build the equivalent if-chain, innermost (last clause) first.

    (cond (t1 e1) (t2 e2a e2b) (else e3))
      => (if t1 e1 (if t2 (begin e2a e2b) e3))

    With no else clause the innermost alternative is Unspecified.
    """
    expanded: SExpression = Unspecified
    last = len(clauses) - 1
    for index in range(last, -1, -1):
        clause = clauses[index]
        if not isinstance(clause, list) or not clause:
            raise SableSyntaxError(f"cond: clause must be a non-empty list, got {clause!r}")
        test, *body = clause
        if not body:
            raise SableSyntaxError(f"cond: clause {index + 1} has no body")
        if test == ELSE:
            if index != last:
                raise SableSyntaxError("cond: else clause must be in the last position")
            expanded = sequence_to_expr(body)
        else:
            expanded = [IF, test, sequence_to_expr(body), expanded]
    return expanded


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    return TailCall(expand_cond(tail), env)
