from sable import SExpression
from sable.types.environment import Environment


class TailCall:
    """The next (expression, environment) pair for the trampoline to evaluate."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
