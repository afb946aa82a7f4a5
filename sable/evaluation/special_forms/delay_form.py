from sable import EvaluatorFn
from sable import SExpression
from sable.errors import SableSyntaxError
from sable.types.environment import Environment
from sable.types.thunk import Thunk


def delay_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Thunk:
    if len(tail) != 1:
        raise SableSyntaxError("delay requires exactly 1 argument")
    return Thunk(tail[0], env)
