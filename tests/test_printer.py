import pytest

from sable.interpreter import Interpreter
from sable.printer import to_source, display_text
from sable.types.nil import Empty, Unspecified
from sable.types.pair import Pair
from sable.types.symbol import Quote


@pytest.mark.parametrize(
    "value,expected",
    [
        (3.0, "3"),
        (-2.5, "-2.5"),
        (True, "#t"),
        (False, "#f"),
        ("a\"b", '"a\\"b"'),
        (Quote("x"), "x"),
        (Empty, "()"),
        (Unspecified, "#<unspecified>"),
        (Pair(1.0, Pair(Quote("b"), Pair("c"))), '(1 b "c")'),
        (Pair(1.0, 2.0), "(1 . 2)"),
        (Pair(Pair(1.0), Pair(Empty)), "((1) ())"),
    ],
)
def test_to_source(value, expected):
    assert to_source(value) == expected


def test_display_text_leaves_strings_raw():
    assert display_text("a\"b") == 'a"b'
    assert display_text(Pair("x")) == "(x)"


def test_procedures_print_by_name():
    interp = Interpreter()
    interp.eval("(define (f x) x)")
    assert to_source(interp.eval("f")) == "#<procedure f>"
    assert to_source(interp.eval("car")) == "#<builtin car>"
    assert to_source(interp.eval("(delay 1)")) == "#<promise>"
