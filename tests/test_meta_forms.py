import io
import logging

import pytest

from sable.errors import SableMalformedList, SableSyntaxError, SableTypeError
from sable.interpreter import Interpreter
from sable.runtime_context import set_source_opener
from sable.types.nil import Unspecified


@pytest.fixture
def interp():
    return Interpreter()


# ------------------ eval ------------------

def test_eval_quoted_expression(interp):
    assert interp.eval("(eval (quote (+ 1 2)))") == 3


def test_eval_atoms(interp):
    assert interp.eval("(eval 5)") == 5
    assert interp.eval('(eval "s")') == "s"
    interp.eval("(define x 11)")
    assert interp.eval("(eval 'x)") == 11


def test_eval_built_list(interp):
    assert interp.eval("(eval (list '* 6 7))") == 42


def test_eval_uses_current_environment(interp):
    interp.eval("(define (f y) (eval '(+ y 1)))")
    assert interp.eval("(f 41)") == 42


def test_eval_definitions_are_visible(interp):
    interp.eval("(eval '(define z 9))")
    assert interp.eval("z") == 9


def test_eval_nested_quote(interp):
    assert str(interp.eval("(eval ''sym)")) == "sym"


def test_eval_rejects_improper_list(interp):
    with pytest.raises(SableMalformedList):
        interp.eval("(eval (cons 1 2))")
    with pytest.raises(SableMalformedList):
        interp.eval("(eval (list '+ (cons 1 2)))")


def test_eval_failures_are_reported_not_raised(interp, caplog):
    with caplog.at_level(logging.ERROR):
        result = interp.eval("(eval '(no-such-procedure 1))")
    assert result is Unspecified
    assert "no-such-procedure" in caplog.text
    # The outer program carries on
    assert interp.eval("(begin (eval '(car 1)) 'after)").id == "after"


def test_eval_arity(interp):
    with pytest.raises(SableSyntaxError):
        interp.eval("(eval 1 2)")


# ------------------ load ------------------

def test_load_file_defines_into_caller_env(interp, tmp_path):
    (tmp_path / "lib.scm").write_text("(define (sq x) (* x x))\n(define base 3)\n")
    path = (tmp_path / "lib").as_posix()
    assert interp.eval(f'(load "{path}")') is Unspecified
    assert interp.eval("(sq base)") == 9


def test_load_keeps_existing_extension(interp, tmp_path):
    (tmp_path / "lib.scm").write_text("(define loaded #t)")
    interp.eval(f'(load "{(tmp_path / "lib.scm").as_posix()}")')
    assert interp.eval("loaded") is True


def test_load_searches_load_path(interp, tmp_path, monkeypatch):
    (tmp_path / "util.scm").write_text("(define util-ready 1)")
    monkeypatch.setenv("SABLE_LOAD_PATH", str(tmp_path))
    interp.eval("(load 'util)")
    assert interp.eval("util-ready") == 1


def test_load_list_continues_after_missing_file(interp, tmp_path, caplog):
    (tmp_path / "good.scm").write_text("(define good 1)")
    good = (tmp_path / "good").as_posix()
    missing = (tmp_path / "missing").as_posix()
    with caplog.at_level(logging.ERROR):
        result = interp.eval(f'(load (list "{missing}" "{good}"))')
    assert result is Unspecified
    assert "missing.scm" in caplog.text
    assert interp.eval("good") == 1


def test_load_uses_injected_opener(interp):
    sources = {"mem.scm": "(define from-memory 5)"}
    opened = []

    def opener(path):
        opened.append(path)
        return io.StringIO(sources[path])

    set_source_opener(opener)
    interp.eval('(load "mem")')
    assert opened == ["mem.scm"]
    assert interp.eval("from-memory") == 5


def test_load_continues_past_failing_form(interp, caplog):
    set_source_opener(lambda path: io.StringIO("(define a 1) (car 5) (define b 2)"))
    with caplog.at_level(logging.ERROR):
        interp.eval('(load "prog")')
    assert interp.eval("(+ a b)") == 3
    assert "car" in caplog.text


def test_load_reports_undecodable_file_and_continues(interp, tmp_path, caplog):
    (tmp_path / "bad.scm").write_bytes(b"\xff\xfe(define x 1)")
    bad = (tmp_path / "bad").as_posix()
    with caplog.at_level(logging.ERROR):
        interp.run(f'(load "{bad}") (define after 1)')
    assert interp.eval("after") == 1
    assert "bad.scm" in caplog.text


def test_load_rejects_non_path(interp):
    with pytest.raises(SableTypeError):
        interp.eval("(load 5)")
