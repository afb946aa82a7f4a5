import pytest

from sable.errors import SableRecursionError
from sable.interpreter import Interpreter


DEPTH = 100_000


def test_large_tail_recursive_countdown_runs_without_exception():
    """A self-call in tail position must not grow the Python stack."""
    interp = Interpreter()
    interp.eval("""
        (define (countdown n)
          (if (= n 0)
              'done
              (countdown (- n 1))))
    """)
    assert str(interp.eval(f"(countdown {DEPTH})")) == "done"


def test_tail_recursive_accumulator():
    interp = Interpreter()
    program = f"""
    (begin
      (define (sum n acc)
        (if (= n 0)
            acc
            (sum (- n 1) (+ n acc))))
      (sum {DEPTH} 0))
    """
    assert interp.eval(program) == DEPTH * (DEPTH + 1) / 2


def test_mutual_tail_recursion():
    interp = Interpreter()
    interp.eval("""
        (define (even? n) (if (= n 0) #t (odd? (- n 1))))
        (define (odd? n) (if (= n 0) #f (even? (- n 1))))
    """)
    assert interp.eval(f"(even? {DEPTH})") is True


def test_tail_calls_through_cond_and_begin():
    interp = Interpreter()
    interp.eval("""
        (define (loop n)
          (cond ((= n 0) 'finished)
                (else (begin 'ignored (loop (- n 1))))))
    """)
    assert str(interp.eval(f"(loop {DEPTH})")) == "finished"


def test_non_tail_recursion_exhausts_the_stack():
    interp = Interpreter()
    interp.eval("(define (count-up n) (if (= n 0) 0 (+ 1 (count-up (- n 1)))))")
    assert interp.eval("(count-up 10)") == 10
    with pytest.raises(SableRecursionError):
        interp.eval(f"(count-up {DEPTH})")
