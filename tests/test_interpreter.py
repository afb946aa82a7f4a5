import logging

import pytest

from sable.__main__ import main
from sable.errors import SableUnboundSymbol
from sable.interpreter import Interpreter
from sable.types.nil import Unspecified


def test_eval_returns_last_value():
    interp = Interpreter()
    assert interp.eval("(define a 1) (define b 2) (+ a b)") == 3


def test_eval_of_empty_source():
    assert Interpreter().eval("") is Unspecified


def test_eval_propagates_errors():
    interp = Interpreter()
    with pytest.raises(SableUnboundSymbol):
        interp.eval("(define a 1) missing (define b 2)")
    # The failing form stops the rest
    with pytest.raises(SableUnboundSymbol):
        interp.eval("b")


def test_run_reports_and_continues(caplog):
    interp = Interpreter()
    with caplog.at_level(logging.ERROR):
        result = interp.run("(define a 1) missing (define b 2) (+ a b)")
    assert result == 3
    assert "SableUnboundSymbol" in caplog.text
    assert "missing" in caplog.text


def test_run_reports_unbalanced_trailing_form(caplog):
    interp = Interpreter()
    with caplog.at_level(logging.ERROR):
        result = interp.run("(define a 1) (car 5) (define b 2) (+ a")
    assert result is Unspecified
    assert interp.eval("(+ a b)") == 3
    assert "car" in caplog.text
    assert "Unmatched" in caplog.text


def test_run_reports_stray_close_paren(caplog):
    interp = Interpreter()
    with caplog.at_level(logging.ERROR):
        interp.run("(define a 1) )")
    assert interp.eval("a") == 1
    assert "SableSyntaxError" in caplog.text


def test_run_reports_stack_exhaustion(caplog):
    interp = Interpreter()
    source = """
        (define (deep n) (if (= n 0) 0 (+ 1 (deep (- n 1)))))
        (deep 100000)
        'survived
    """
    with caplog.at_level(logging.ERROR):
        result = interp.run(source)
    assert str(result) == "survived"
    assert "SableRecursionError" in caplog.text


def test_prelude_is_evaluated():
    interp = Interpreter(prelude="(define (inc x) (+ x 1))")
    assert interp.eval("(inc 1)") == 2


def test_main_loads_files(tmp_path, capsys):
    script = tmp_path / "hello.scm"
    script.write_text('(display "hello") (newline) (display (+ 1 2))')
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello\n3"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.scm")]) == 1
    assert "SableIOError" in capsys.readouterr().err
