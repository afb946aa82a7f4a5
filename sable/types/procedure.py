"""Procedure values: host builtins and user-defined closures.

Procedure is a closed hierarchy. The evaluator dispatches on the concrete
class with a match statement, so a new callable kind has to be added there
explicitly.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable

from sable import SExpression, LispValue
from sable.errors import SableArityError
from sable.types.environment import Environment
from sable.types.nil import Unspecified
from sable.types.pair import Pair
from sable.types.symbol import Symbol


class Procedure:
    """Base class for anything that can sit in operator position."""

    __slots__ = ("name",)

    def __init__(self, name: str | None = None):
        self.name = name


class Builtin(Procedure):
    """A host-native procedure, invoked with already-evaluated arguments."""

    __slots__ = ("fn",)

    def __init__(self, name: str, fn: Callable[[Environment, list[LispValue]], LispValue]):
        super().__init__(name)
        self.fn = fn

    def call(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"


class Closure(Procedure):
    """A lambda with formal parameters, body, and captured defining env.

    `formals` is a list of Symbols, or a single Symbol that receives the
    whole argument list as a Pair list.
    """

    __slots__ = ("formals", "body_forms", "env")

    def __init__(
        self,
        formals: list[Symbol] | Symbol,
        body_forms: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        super().__init__(name)
        self.formals = formals
        self.body_forms = body_forms
        self.env = env

    @property
    def body(self) -> SExpression:
        """The body as one expression: an implicit begin for several forms."""
        if not self.body_forms:
            return Unspecified
        if len(self.body_forms) == 1:
            return self.body_forms[0]
        return [Symbol("begin"), *self.body_forms]

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a new frame parented to the captured env."""
        frame = Environment(outer=self.env)
        if isinstance(self.formals, Symbol):
            frame.define(self.formals, Pair.from_iterable(args))
            return frame
        if len(args) != len(self.formals):
            raise SableArityError(
                f"{self!r} requires {len(self.formals)} argument(s) but {len(args)} provided"
            )
        for formal, arg in zip(self.formals, args):
            frame.define(formal, arg)
        return frame

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            if isinstance(self.formals, Symbol):
                buffer.write(str(self.formals))
            else:
                buffer.write("(")
                buffer.write(" ".join(str(f) for f in self.formals))
                buffer.write(")")
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        if self.name:
            return f"#<procedure {self.name}>"
        return f"#<procedure {self}>"
