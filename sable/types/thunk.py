from __future__ import annotations

from sable import SExpression, LispValue, EvaluatorFn
from sable.types.environment import Environment


class Thunk:
    """A delayed expression together with the environment it must run in.

    Forcing memoizes: the expression is evaluated at most once.
    """

    __slots__ = ("expr", "env", "_forced", "_value")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
        self._forced = False
        self._value: LispValue = None

    @property
    def forced(self) -> bool:
        return self._forced

    def force(self, evaluate_fn: EvaluatorFn) -> LispValue:
        if not self._forced:
            value = evaluate_fn(self.expr, self.env)
            # A nested force of the same promise may have finished first
            if not self._forced:
                self._value = value
                self._forced = True
                # Release the captured expression and environment
                self.expr = None
                self.env = None
        return self._value

    def __repr__(self) -> str:
        return "#<promise>"
