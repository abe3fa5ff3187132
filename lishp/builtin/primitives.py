"""Built-in operations for the lishp runtime environment.

This module defines the arithmetic, comparison, list and predicate primitives
and the immutable table that the interpreter injects into its root
environment. Every function takes the list of already-evaluated arguments;
arity is enforced by the Primitive wrapper from the declared bounds, operand
kinds here.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from lishp import LispValue
from lishp.errors import (
    LishpDivisionByZero,
    LishpOverflowError,
    LishpTypeError,
)
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.pair import Pair, from_iterable, is_proper_list, to_list
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol
from lishp.types.value import (
    in_int_range,
    is_callable_value,
    is_integer,
    is_number,
    is_truthy,
    values_eq,
    values_equal,
)

logger = logging.getLogger(__name__)


# -------------------------------
# Operand checks
# -------------------------------
def _numbers(op: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if not is_number(a):
            raise LishpTypeError("number", a, op)
    return args


def _integers(op: str, args: list[LispValue]) -> list[int]:
    for a in args:
        if not is_integer(a):
            raise LishpTypeError("integer", a, op)
    return args


def _checked(op: str, result: LispValue) -> LispValue:
    """Reject integer results outside the signed 64-bit range."""
    if is_integer(result) and not in_int_range(result):
        raise LishpOverflowError(op, result)
    return result


def _pair(op: str, value: LispValue) -> Pair:
    if not isinstance(value, Pair):
        raise LishpTypeError("pair", value, op)
    return value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments; 0 with none."""
    return _checked("+", sum(_numbers("+", args)))


def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _numbers("-", args)
    if len(args) == 1:
        return _checked("-", -args[0])
    result = args[0]
    for x in args[1:]:
        result = _checked("-", result - x)
    return result


def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; 1 with none."""
    result = 1
    for x in _numbers("*", args):
        result = _checked("*", result * x)
    return result


def _divide(op: str, a: LispValue, b: LispValue) -> LispValue:
    if b == 0:
        raise LishpDivisionByZero(op)
    if is_integer(a) and is_integer(b):
        return _checked(op, _trunc_div(a, b))
    return a / b


def div(args: list[LispValue]) -> LispValue:
    """Divide the first argument by each of the rest; (/ x) is 1/x.

    Integers divide with truncation toward zero; any Float operand makes the
    step a Float division.
    """
    _numbers("/", args)
    if len(args) == 1:
        return _divide("/", 1, args[0])
    result = args[0]
    for x in args[1:]:
        result = _divide("/", result, x)
    return result


def quotient(args: list[LispValue]) -> int:
    a, b = _integers("quotient", args)
    return _divide("quotient", a, b)


def remainder(args: list[LispValue]) -> int:
    """Remainder with the sign of the dividend."""
    a, b = _integers("remainder", args)
    if b == 0:
        raise LishpDivisionByZero("remainder")
    return a - b * _trunc_div(a, b)


def modulo(args: list[LispValue]) -> int:
    """Modulo with the sign of the divisor."""
    a, b = _integers("modulo", args)
    if b == 0:
        raise LishpDivisionByZero("modulo")
    return a % b


def absolute(args: list[LispValue]) -> LispValue:
    (x,) = _numbers("abs", args)
    return _checked("abs", abs(x))


def minimum(args: list[LispValue]) -> LispValue:
    return min(_numbers("min", args))


def maximum(args: list[LispValue]) -> LispValue:
    return max(_numbers("max", args))


# -------------------------------
# Comparison
# -------------------------------
def _chain(op: str, test: Callable[[LispValue, LispValue], bool]) -> Callable[[list[LispValue]], bool]:
    def compare(args: list[LispValue]) -> bool:
        _numbers(op, args)
        return all(test(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = f"compare_{op}"
    return compare


num_eq = _chain("=", lambda a, b: a == b)
lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def eq(args: list[LispValue]) -> bool:
    """Identity for pairs and procedures, value equality for atoms."""
    return values_eq(args[0], args[1])


def equal(args: list[LispValue]) -> bool:
    """Structural equality."""
    return values_equal(args[0], args[1])


def logical_not(args: list[LispValue]) -> bool:
    return not is_truthy(args[0])


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[LispValue]) -> Pair:
    return Pair(args[0], args[1])


def car(args: list[LispValue]) -> LispValue:
    return _pair("car", args[0]).head


def cdr(args: list[LispValue]) -> LispValue:
    return _pair("cdr", args[0]).tail


def list_builtin(args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def length(args: list[LispValue]) -> int:
    try:
        return len(to_list(args[0]))
    except ValueError:
        raise LishpTypeError("proper list", args[0], "length") from None


def set_car(args: list[LispValue]) -> LispValue:
    """Replace the head of a pair in place; every holder of the pair sees it."""
    _pair("set-car!", args[0]).head = args[1]
    return Nil


def set_cdr(args: list[LispValue]) -> LispValue:
    """Replace the tail of a pair in place; every holder of the pair sees it."""
    _pair("set-cdr!", args[0]).tail = args[1]
    return Nil


# -------------------------------
# Predicates
# -------------------------------
def _predicate(test: Callable[[LispValue], bool]) -> Callable[[list[LispValue]], bool]:
    return lambda args: bool(test(args[0]))


is_null = _predicate(lambda v: v is Nil)
is_pair = _predicate(lambda v: isinstance(v, Pair))
is_list = _predicate(is_proper_list)
is_number_p = _predicate(is_number)
is_integer_p = _predicate(is_integer)
is_float = _predicate(lambda v: isinstance(v, float))
is_boolean = _predicate(lambda v: isinstance(v, bool))
is_symbol = _predicate(lambda v: isinstance(v, Symbol))
is_string = _predicate(lambda v: isinstance(v, str))
is_procedure = _predicate(is_callable_value)


# -------------------------------
# Table and registration
# -------------------------------
# name, function, minimum arity, maximum arity (None: unbounded)
_TABLE = [
    ("+", add, 0, None),
    ("-", sub, 1, None),
    ("*", mul, 0, None),
    ("/", div, 1, None),
    ("quotient", quotient, 2, 2),
    ("remainder", remainder, 2, 2),
    ("modulo", modulo, 2, 2),
    ("abs", absolute, 1, 1),
    ("min", minimum, 1, None),
    ("max", maximum, 1, None),
    ("=", num_eq, 1, None),
    ("<", lt, 1, None),
    ("<=", lte, 1, None),
    (">", gt, 1, None),
    (">=", gte, 1, None),
    ("eq?", eq, 2, 2),
    ("equal?", equal, 2, 2),
    ("not", logical_not, 1, 1),
    ("cons", cons, 2, 2),
    ("car", car, 1, 1),
    ("cdr", cdr, 1, 1),
    ("list", list_builtin, 0, None),
    ("length", length, 1, 1),
    ("set-car!", set_car, 2, 2),
    ("set-cdr!", set_cdr, 2, 2),
    ("null?", is_null, 1, 1),
    ("pair?", is_pair, 1, 1),
    ("list?", is_list, 1, 1),
    ("number?", is_number_p, 1, 1),
    ("integer?", is_integer_p, 1, 1),
    ("float?", is_float, 1, 1),
    ("boolean?", is_boolean, 1, 1),
    ("symbol?", is_symbol, 1, 1),
    ("string?", is_string, 1, 1),
    ("procedure?", is_procedure, 1, 1),
]

PRIMITIVES: Mapping[Symbol, Primitive] = MappingProxyType({
    Symbol(name): Primitive(name, fn, lo, hi) for name, fn, lo, hi in _TABLE
})


def register(env: Environment, primitives: Mapping[Symbol, Primitive] = PRIMITIVES) -> None:
    """Bind every primitive of the table into `env` (normally the root frame)."""
    env.update(primitives)
    logger.debug("Registered %d primitives", len(primitives))
