"""Application engine for Sable.

Builtins are called immediately. Closures are never called here: binding
produces a fresh frame and the body comes back as a TailCall, which the
evaluator loop picks up. That is what keeps closure calls in tail position
from growing the Python stack.
"""

from sable import LispValue
from sable.errors import SableNotCallable
from sable.printer import to_source
from sable.types.environment import Environment
from sable.types.procedure import Builtin, Closure
from sable.types.tail_call import TailCall


def apply_procedure(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
) -> LispValue | TailCall:
    """Apply `fn` to already-evaluated `args`.

    - Builtin: invoked with the caller's env and the argument list.
    - Closure: arity-checked and bound; returns TailCall(body, new frame).
    - Anything else raises SableNotCallable.
    """
    match fn:
        case Builtin():
            return fn.call(env, args)
        case Closure():
            return TailCall(fn.body, fn.extend_env(args))
        case _:
            raise SableNotCallable(f"{to_source(fn)} is not callable")
