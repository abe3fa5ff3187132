import sys

import pytest

from lishp import errors
from lishp.interpreter import Interpreter
from lishp.types.symbol import Symbol

define, lambda_, if_ = Symbol("define"), Symbol("lambda"), Symbol("if")
n, acc = Symbol("n"), Symbol("acc")
plus, minus, times, eq = Symbol("+"), Symbol("-"), Symbol("*"), Symbol("=")

FACT = [define, Symbol("fact"),
        [lambda_, [n], [if_, [eq, n, 0], 1, [times, n, [Symbol("fact"), [minus, n, 1]]]]]]


def test_factorial_of_five(interp):
    interp.eval(FACT)
    assert interp.eval([Symbol("fact"), 5]) == 120


def test_factorial_at_int64_edge(interp):
    interp.eval(FACT)
    assert interp.eval([Symbol("fact"), 20]) == 2432902008176640000
    with pytest.raises(errors.LishpOverflowError):
        interp.eval([Symbol("fact"), 21])


def test_fibonacci(interp):
    interp.eval([define, Symbol("fib"),
                 [lambda_, [n],
                  [if_, [Symbol("<"), n, 2], n,
                   [plus, [Symbol("fib"), [minus, n, 1]], [Symbol("fib"), [minus, n, 2]]]]]])
    assert interp.eval([Symbol("fib"), 15]) == 610


def test_deep_non_tail_recursion(interp):
    interp.eval([define, Symbol("sum-to"),
                 [lambda_, [n], [if_, [eq, n, 0], 0, [plus, n, [Symbol("sum-to"), [minus, n, 1]]]]]])
    assert interp.eval([Symbol("sum-to"), 1000]) == 500500


def test_tail_calls_run_in_constant_stack(interp):
    # Far deeper than the host stack would allow without the trampoline
    interp.eval([define, Symbol("count"),
                 [lambda_, [n, acc], [if_, [eq, n, 0], acc, [Symbol("count"), [minus, n, 1], [plus, acc, 1]]]]])
    assert interp.eval([Symbol("count"), 30000, 0]) == 30000


def test_runaway_recursion_is_reported(interp):
    interp.eval([define, Symbol("down"), [lambda_, [n], [plus, 1, [Symbol("down"), n]]]])
    with pytest.raises(errors.LishpRecursionError) as excinfo:
        interp.eval([Symbol("down"), 0])
    assert excinfo.value.limit == sys.getrecursionlimit()
    # the interpreter is still usable afterwards
    assert interp.eval([plus, 1, 2]) == 3


def test_recursion_limit_only_raised(monkeypatch):
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 50000)
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    Interpreter(recursion_limit=100)
    assert calls == []

    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 1000)
    Interpreter(recursion_limit=4000)
    assert calls == [4000]
