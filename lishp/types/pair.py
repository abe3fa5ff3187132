"""The cons cell and helpers for moving between Python sequences and lists."""

from __future__ import annotations

from typing import Iterable, Iterator

from lishp import LispValue
from lishp.types.nil import Nil


class Pair:
    """A mutable cons cell.

    Chains of pairs whose final tail is Nil are proper lists; any other final
    tail makes a dotted (improper) list. `head` and `tail` are only reassigned
    by the in-place `set-car!`/`set-cdr!` primitives.
    """

    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue = Nil):
        self.head = head
        self.tail = tail

    def __eq__(self, other: object) -> bool:
        from lishp.types.value import values_equal
        if not isinstance(other, Pair):
            return NotImplemented
        return values_equal(self, other)

    # Mutable and compared structurally
    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate over the heads of the chain, stopping at the first non-pair tail."""
        node: LispValue = self
        while isinstance(node, Pair):
            yield node.head
            node = node.tail

    def __repr__(self) -> str:
        return f"<Pair {self}>"

    def __str__(self) -> str:
        # The printer walks tails iteratively and marks cycles
        from lishp.printer import to_lisp_string
        return to_lisp_string(self)


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from a Python iterable; `tail` terminates the chain."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def last_tail(value: LispValue) -> LispValue:
    """Follow tails until a non-pair is reached (Nil for proper lists)."""
    seen: set[int] = set()
    while isinstance(value, Pair):
        # set-cdr! can make a chain circular
        if id(value) in seen:
            return value
        seen.add(id(value))
        value = value.tail
    return value


def is_proper_list(value: LispValue) -> bool:
    return last_tail(value) is Nil


def to_list(value: LispValue) -> list[LispValue]:
    """Return the elements of a proper list as a Python list.

    Raises ValueError for dotted or circular chains; callers translate this
    into the error appropriate to them.
    """
    if not is_proper_list(value):
        raise ValueError("not a proper list")
    return list(value) if isinstance(value, Pair) else []
