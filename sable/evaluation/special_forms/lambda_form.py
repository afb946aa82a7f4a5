from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableSyntaxError
from sable.types.environment import Environment
from sable.types.procedure import Closure
from sable.types.symbol import Symbol


def to_symbol(expr: SExpression, form: str) -> Symbol:
    if isinstance(expr, Symbol):
        return expr
    raise SableSyntaxError(f"{form}: {expr!r} is not a symbol")


def parse_formals(params: SExpression, form: str) -> list[Symbol] | Symbol:
    """(a b c) binds positionally; a bare symbol receives the whole argument list."""
    if isinstance(params, list):
        return [to_symbol(p, form) for p in params]
    return to_symbol(params, form)


def make_closure(tail: list[SExpression], env: Environment, name: str | None = None) -> Closure:
    # The body is an implicit begin; an empty body yields Unspecified when called.
    if not tail:
        raise SableSyntaxError("lambda requires a parameter list")

    params, *body = tail
    return Closure(parse_formals(params, "lambda"), body, env, name=name)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return make_closure(tail, env)
