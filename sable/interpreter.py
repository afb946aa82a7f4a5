from __future__ import annotations

from sable import LispValue
from sable.builtin.env_builtin import register
from sable.evaluation.evaluator import evaluate
from sable.evaluation.sequence import evaluate_guarded, run_forms
from sable.reader.parser import lex, TokenStream
from sable.types.environment import Environment
from sable.types.nil import Unspecified


class Interpreter:
    """
    Reads and evaluates Sable code against one root Environment that
    persists across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        if prelude:
            self.run(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value.

        Errors propagate to the caller and stop at the failing form.
        """
        stream = TokenStream(lex(code))
        result: LispValue = Unspecified
        while (expr := stream.parse_expr()) is not None:
            result = evaluate_guarded(expr, self.env, evaluate)
        return result

    def run(self, code: str) -> LispValue:
        """Evaluate every form in `code`, logging failures and moving on.

        Returns the value of the last form that succeeded.
        """
        return run_forms(TokenStream(lex(code)).parse_all(), self.env, evaluate)
