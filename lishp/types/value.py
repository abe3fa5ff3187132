"""Classification, truthiness and structural equality over lishp values.

The value kinds form a closed set:

    Nil | bool | int | float | Symbol | str | Pair | Closure | Primitive

`bool` is checked before `int` throughout because Python's bool subclasses int,
while lishp keeps Boolean and Integer distinct.
"""

from __future__ import annotations

from lishp import LispValue
from lishp.types.closure import Closure
from lishp.types.nil import NilType, Nil
from lishp.types.pair import Pair
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: LispValue) -> bool:
    return is_integer(value) or isinstance(value, float)


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def is_callable_value(value: LispValue) -> bool:
    return isinstance(value, (Closure, Primitive))


def is_value(value: LispValue) -> bool:
    """True if `value` belongs to the closed set of runtime value kinds."""
    if is_integer(value):
        return in_int_range(value)
    return isinstance(value, (NilType, bool, float, Symbol, str, Pair, Closure, Primitive))


def is_truthy(value: LispValue) -> bool:
    """Everything except Nil and #f is true (0 and "" included)."""
    return not (value is Nil or value is False)


def kind_of(value: LispValue) -> str:
    match value:
        case NilType():
            return "nil"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case Symbol():
            return "symbol"
        case str():
            return "string"
        case Pair():
            return "pair"
        case Closure():
            return "closure"
        case Primitive():
            return "primitive"
    return type(value).__name__


def _atoms_equal(a: LispValue, b: LispValue) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Symbol) or isinstance(b, Symbol):
        return isinstance(a, Symbol) and isinstance(b, Symbol) and a.id == b.id
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    # Nil, pairs against atoms, closures and primitives: identity only
    return False


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality.

    Numbers compare by numeric value across Integer and Float, booleans only
    equal booleans, symbols and strings compare by content without mixing,
    pairs compare element-wise and closures/primitives by identity.

    Circular lists built with set-car!/set-cdr! compare equal when they
    unfold to the same infinite structure.
    """
    # Explicit worklist so neither long nor deeply nested lists recurse.
    # `assumed` holds pair comparisons already under way; meeting one again
    # means the structures repeat in step.
    pending = [(a, b)]
    assumed: set[tuple[int, int]] = set()
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if isinstance(a, Pair) and isinstance(b, Pair):
            key = (id(a), id(b))
            if key in assumed:
                continue
            assumed.add(key)
            pending.append((a.tail, b.tail))
            pending.append((a.head, b.head))
            continue
        if not _atoms_equal(a, b):
            return False
    return True


def values_eq(a: LispValue, b: LispValue) -> bool:
    """Identity for pairs and callables, value equality for atoms."""
    if isinstance(a, (Pair, Closure, Primitive)) or isinstance(b, (Pair, Closure, Primitive)):
        return a is b
    return values_equal(a, b)
