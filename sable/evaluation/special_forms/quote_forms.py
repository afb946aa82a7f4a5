from sable import SExpression, LispValue, EvaluatorFn
from sable.errors import SableSyntaxError
from sable.types.nil import EmptyType
from sable.types.pair import Pair
from sable.types.symbol import Quote, Symbol


def quote_datum(expr: SExpression) -> LispValue:
    """Turn a parsed datum into the runtime value it denotes.

    Compound forms become Pair lists, symbols become Quote atoms, and
    literals decode to their typed value.
    """
    match expr:
        case bool() | str() | Quote() | EmptyType():
            return expr
        case int() | float():
            return float(expr)
        case Symbol():
            return Quote(expr.id)
        case list():
            return Pair.from_iterable(quote_datum(item) for item in expr)
        case _:
            raise SableSyntaxError(f"quote: invalid argument {expr!r}")


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SableSyntaxError("quote expects exactly 1 argument")
    return quote_datum(tail[0])
