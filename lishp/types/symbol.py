"""Symbols: names used for bindings and produced by quoting identifiers."""

from __future__ import annotations
import sys


class Symbol:
    """An identifier compared by name.

    Two symbols with the same name are equal and hash alike, so a Symbol can
    key an environment frame. A Symbol never equals a string of the same text.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned so frame lookups compare a shared string
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
