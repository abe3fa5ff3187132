"""Lisp-style rendering of runtime values for diagnostics.

A pure function of the value: no environment access and no I/O.
"""

from __future__ import annotations

from io import StringIO

from lishp import LispValue
from lishp.types.closure import Closure
from lishp.types.nil import NilType
from lishp.types.pair import Pair
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _escape(s: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in s)


def to_lisp_string(value: LispValue, readable: bool = True) -> str:
    """Render `value` as Lisp text.

    With `readable` set, strings are quoted and escaped; otherwise they are
    written as-is (display style).
    """
    with StringIO() as buffer:
        _write(value, buffer, readable, set())
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO, readable: bool, active: set[int]) -> None:
    match value:
        case NilType():
            buffer.write("()")
        case bool():
            buffer.write("#t" if value else "#f")
        case int() | float():
            buffer.write(repr(value))
        case Symbol():
            buffer.write(value.id)
        case str():
            buffer.write(f'"{_escape(value)}"' if readable else value)
        case Pair():
            _write_list(value, buffer, readable, active)
        case Closure():
            buffer.write(str(value))
        case Primitive():
            buffer.write(repr(value))
        case _:
            buffer.write(f"#<python {value!r}>")


def _write_list(pair: Pair, buffer: StringIO, readable: bool, active: set[int]) -> None:
    # `active` holds the pairs being written above us; set-car!/set-cdr! can
    # build cycles, which print as "..."
    if id(pair) in active:
        buffer.write("...")
        return
    seen: list[int] = []
    buffer.write("(")
    node: LispValue = pair
    first = True
    while isinstance(node, Pair):
        if id(node) in active:
            buffer.write(" ...")
            node = None
            break
        active.add(id(node))
        seen.append(id(node))
        if not first:
            buffer.write(" ")
        _write(node.head, buffer, readable, active)
        first = False
        node = node.tail
    if node is not None and not isinstance(node, NilType):
        buffer.write(" . ")
        _write(node, buffer, readable, active)
    buffer.write(")")
    for i in seen:
        active.discard(i)
