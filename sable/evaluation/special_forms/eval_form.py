"""eval: reflect a list value back into program text and evaluate it.

Failures during the secondary evaluation are logged and swallowed here
instead of propagating to the form that called eval. A malformed argument
is still fatal.
"""

import logging

from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableError, SableMalformedList, SableSyntaxError
from sable.printer import to_source
from sable.reader.parser import parse
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.pair import Pair

logger = logging.getLogger(__name__)


def is_well_formed(value: LispValue) -> bool:
    """Every Pair reachable from `value` must be a proper list."""
    if not isinstance(value, Pair):
        return True
    if not value.is_list():
        return False
    return all(is_well_formed(item) for item in value.to_list())


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise SableSyntaxError("eval expects exactly one argument")

    value = evaluate_fn(tail[0], env)
    if not is_well_formed(value):
        raise SableMalformedList(f"eval: malformed list {to_source(value)}")

    source = to_source(value)
    forms = parse(source)
    result: LispValue = Unspecified
    try:
        for form in forms:
            result = evaluate_fn(form, env)
    except SableError as exc:
        logger.error("eval of %s failed: %s", source, exc)
        return Unspecified
    return result
