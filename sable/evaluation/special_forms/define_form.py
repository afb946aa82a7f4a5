from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableSyntaxError
from sable.evaluation.special_forms.lambda_form import make_closure, to_symbol
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.procedure import Closure
from sable.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; sugar for (define name (lambda (params...) body...))

    Binds in the current frame only and returns Unspecified.
    """
    if not tail:
        raise SableSyntaxError("define requires a name")

    target, *rest = tail
    if isinstance(target, list):
        if not target:
            raise SableSyntaxError("define: missing procedure name")
        name, *params = target
        symbol = to_symbol(name, "define")
        formals = [to_symbol(p, "define") for p in params]
        env.define(symbol, Closure(formals, rest, env, name=symbol.id))
        return Unspecified

    symbol = to_symbol(target, "define")
    if len(rest) != 1:
        raise SableSyntaxError(
            f"define: bad syntax for {symbol} (expected exactly one expression after identifier)"
        )
    match rest[0]:
        case [Symbol() as head, *lambda_tail] if head == LAMBDA:
            # (define f (lambda ...)) names the closure as it is built
            value = make_closure(lambda_tail, env, name=symbol.id)
        case expr:
            value = evaluate_fn(expr, env)
    env.define(symbol, value)
    return Unspecified
