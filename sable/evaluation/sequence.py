"""Top-level sequencing with a per-form error boundary."""

from __future__ import annotations

import logging
from typing import Iterable

from sable import SExpression, LispValue, EvaluatorFn
from sable.errors import SableError, SableRecursionError, SableSyntaxError
from sable.types.environment import Environment
from sable.types.nil import Unspecified

logger = logging.getLogger(__name__)


def evaluate_guarded(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate one form, turning host stack exhaustion into a SableError."""
    try:
        return evaluate_fn(form, env)
    except RecursionError as exc:
        raise SableRecursionError(
            "Recursion too deep: non-tail recursion exhausted the stack"
        ) from exc


def run_forms(forms: Iterable[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate each form; an error aborts only the form that raised it.

    `forms` may be a lazy reader. A syntax error while reading the next form
    is logged and ends the sequence, since the reader cannot resynchronise.
    Returns the value of the last form that succeeded, or Unspecified.
    """
    result: LispValue = Unspecified
    pending = iter(forms)
    while True:
        try:
            form = next(pending)
        except StopIteration:
            return result
        except SableSyntaxError as exc:
            logger.error("%s: %s", type(exc).__name__, exc)
            return result
        try:
            result = evaluate_guarded(form, env, evaluate_fn)
        except SableError as exc:
            logger.error("%s: %s", type(exc).__name__, exc)
