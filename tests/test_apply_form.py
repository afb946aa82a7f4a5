import pytest

from sable.errors import SableArityError, SableSyntaxError, SableTypeError, SableNotCallable
from sable.interpreter import Interpreter


@pytest.fixture
def interp():
    return Interpreter()


def test_apply_builtin_plus_with_list(interp):
    assert interp.eval("(apply + (list 1 2 3))") == 6


def test_apply_quoted_list_binds_positionally(interp):
    interp.eval("(define (triple a b c) (list c b a))")
    assert interp.eval("(apply triple (quote (1 2 3)))") == interp.eval("'(3 2 1)")


def test_apply_lambda_defined_via_define(interp):
    src = """
    (define add2 (lambda (a b) (+ a b)))
    (apply add2 (list 10 20))
    """
    assert interp.eval(src) == 30


def test_apply_with_empty_list(interp):
    interp.eval("(define (seven) 7)")
    assert interp.eval("(apply seven '())") == 7


def test_apply_passes_values_without_reevaluating(interp):
    # The quoted atoms must reach the procedure as data, not as variable references
    interp.eval("(define (first x y) x)")
    assert str(interp.eval("(apply first '(undefined-name other))")) == "undefined-name"
    assert interp.eval('(apply first (list "text" 1))') == "text"
    assert interp.eval("(apply first (list '(1 2) 3))") == interp.eval("'(1 2)")


def test_apply_arity_mismatch(interp):
    interp.eval("(define (two a b) a)")
    with pytest.raises(SableArityError):
        interp.eval("(apply two '(1))")


@pytest.mark.parametrize("source", ["(apply +)", "(apply + '(1) '(2))"])
def test_apply_requires_two_operands(interp, source):
    with pytest.raises(SableSyntaxError):
        interp.eval(source)


def test_apply_requires_list(interp):
    with pytest.raises(SableTypeError):
        interp.eval("(apply + 5)")
    with pytest.raises(SableTypeError):
        interp.eval("(apply + (cons 1 2))")


def test_apply_non_procedure(interp):
    with pytest.raises(SableNotCallable):
        interp.eval("(apply 5 '(1))")
