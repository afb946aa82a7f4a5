from sable import SExpression
from sable.errors import SableSyntaxError
from sable.evaluation.predicates import is_true
from sable.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, evaluate_fn) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f at the
    first false one without evaluating the rest. Otherwise returns #t. The
    result is always a boolean, never the last operand's value. At least one
    operand is required.
    """
    if not tail:
        raise SableSyntaxError("and requires at least 1 argument")

    for expr in tail:
        if not is_true(evaluate_fn(expr, env)):
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, evaluate_fn) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns #t at the first true operand, else #f. Like `and`
    it returns booleans only and rejects an empty operand list.
    """
    if not tail:
        raise SableSyntaxError("or requires at least 1 argument")

    for expr in tail:
        if is_true(evaluate_fn(expr, env)):
            return True
    return False
