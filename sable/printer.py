"""Render runtime values as Scheme source text.

`to_source` output is read back by `eval`, so for data (numbers, booleans,
strings, quoted symbols and proper lists) it must parse to an equivalent
datum.
"""

from __future__ import annotations

from io import StringIO

from sable import LispValue
from sable.types.nil import EmptyType, UnspecifiedType
from sable.types.pair import Pair
from sable.types.procedure import Builtin, Closure
from sable.types.symbol import Quote, Symbol
from sable.types.thunk import Thunk

_ESCAPES = {'"': '\\"', '\\': '\\\\', '\n': '\\n', '\t': '\\t', '\r': '\\r'}


def format_number(value: float) -> str:
    if value != value or value in (float('inf'), float('-inf')):
        return repr(value)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def quote_string(text: str) -> str:
    return '"' + ''.join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _write(buffer: StringIO, value: LispValue, raw_strings: bool) -> None:
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int() | float():
            buffer.write(format_number(value))
        case str():
            buffer.write(value if raw_strings else quote_string(value))
        case Symbol() | Quote():
            buffer.write(value.id)
        case EmptyType():
            buffer.write("()")
        case UnspecifiedType():
            buffer.write("#<unspecified>")
        case Pair():
            buffer.write("(")
            cell: LispValue = value
            first = True
            while isinstance(cell, Pair):
                if not first:
                    buffer.write(" ")
                _write(buffer, cell.head, raw_strings)
                cell = cell.tail
                first = False
            if not isinstance(cell, EmptyType):
                buffer.write(" . ")
                _write(buffer, cell, raw_strings)
            buffer.write(")")
        case list():
            # Unevaluated syntax, e.g. a closure body in an error message
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(buffer, item, raw_strings)
            buffer.write(")")
        case Closure() | Builtin() | Thunk():
            buffer.write(repr(value))
        case None:
            buffer.write("()")
        case _:
            buffer.write(str(value))


def to_source(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value, raw_strings=False)
        return buffer.getvalue()


def display_text(value: LispValue) -> str:
    """Like to_source but strings are written without quotes or escapes."""
    with StringIO() as buffer:
        _write(buffer, value, raw_strings=True)
        return buffer.getvalue()
