import logging

from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableIOError, SableSyntaxError, SableTypeError
from sable.modules.source_loader import load_file
from sable.printer import to_source
from sable.types.environment import Environment
from sable.types.nil import EmptyType, Unspecified
from sable.types.pair import Pair
from sable.types.symbol import Quote

logger = logging.getLogger(__name__)


def _load_value(value: LispValue, env: Environment, evaluate_fn: EvaluatorFn) -> None:
    match value:
        case str() | Quote():
            try:
                load_file(str(value), env, evaluate_fn)
            except SableIOError as exc:
                # One missing file does not stop its siblings
                logger.error("%s", exc)
        case Pair() if value.is_list():
            for item in value.to_list():
                _load_value(item, env, evaluate_fn)
        case EmptyType():
            pass
        case _:
            raise SableTypeError(
                f"load: argument can only contain strings, quoted symbols or lists, got {to_source(value)}"
            )


def load_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (load "file")  (load 'file)  (load (list "a" "b"))

    Definitions made by the loaded files land in `env`, the caller's frame.
    """
    if len(tail) != 1:
        raise SableSyntaxError("load expects exactly one argument")
    _load_value(evaluate_fn(tail[0], env), env, evaluate_fn)
    return Unspecified
