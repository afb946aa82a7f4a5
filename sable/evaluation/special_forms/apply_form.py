from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import SableSyntaxError, SableTypeError
from sable.printer import to_source
from sable.types.pair import is_list, list_items


def apply_form(
    tail: list[SExpression],
    env,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (apply fn args)

    Unpacks the list value `args` into a synthetic application
    (fn arg1 arg2 ...) and evaluates it through the ordinary application
    path. The argument values are already evaluated and self-evaluate when
    the synthetic form is evaluated.
    """
    if len(tail) != 2:
        raise SableSyntaxError("apply requires exactly 2 arguments: a procedure and an argument list")

    fn_expr, args_expr = tail
    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)

    if not is_list(args_val):
        raise SableTypeError(f"apply: argument must be a list, got {to_source(args_val)}")

    return evaluate_fn([fn_val, *list_items(args_val)], env)
