from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.tail_call import TailCall


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        return Unspecified
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
