from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableSyntaxError
from sable.evaluation.predicates import is_true
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise SableSyntaxError("if requires a condition, a consequent and an optional alternative")

    if is_true(evaluate_fn(tail[0], env)):
        return TailCall(tail[1], env)
    elif len(tail) == 3:
        return TailCall(tail[2], env)
    else:
        return Unspecified
