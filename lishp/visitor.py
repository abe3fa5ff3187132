"""Walking runtime values.

Subclass `Visitor` and override only the `visit_*` methods you need; the
others are no-ops. `visit` delegates pairs to `visit_pair`, which by default
visits the head and then the tail, and atoms to the method for their kind.

Example::

    class SymbolCounter(Visitor):
        def __init__(self):
            self.count = 0

        def visit_symbol(self, s):
            self.count += 1

Chains made circular with set-cdr! are not detected by the default
`visit_pair`; override it if such values can reach the visitor.
"""

from __future__ import annotations

from lishp import LispValue
from lishp.types.closure import Closure
from lishp.types.nil import NilType
from lishp.types.pair import Pair
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol


class Visitor:
    def visit(self, value: LispValue) -> None:
        if isinstance(value, Pair):
            self.visit_pair(value)
        else:
            self.visit_atom(value)

    def visit_pair(self, pair: Pair) -> None:
        """Visit each element of the chain, then a non-Nil final tail."""
        node: LispValue = pair
        while isinstance(node, Pair):
            self.visit(node.head)
            node = node.tail
        if not isinstance(node, NilType):
            self.visit(node)

    def visit_atom(self, value: LispValue) -> None:
        match value:
            case NilType():
                self.visit_nil()
            case bool():
                self.visit_boolean(value)
            case int():
                self.visit_integer(value)
            case float():
                self.visit_float(value)
            case Symbol():
                self.visit_symbol(value)
            case str():
                self.visit_string(value)
            case Closure():
                self.visit_closure(value)
            case Primitive():
                self.visit_primitive(value)
            case _:
                raise TypeError(f"Not a lishp value: {value!r}")

    def visit_nil(self) -> None:
        pass

    def visit_boolean(self, b: bool) -> None:
        pass

    def visit_integer(self, i: int) -> None:
        pass

    def visit_float(self, f: float) -> None:
        pass

    def visit_string(self, s: str) -> None:
        pass

    def visit_symbol(self, s: Symbol) -> None:
        pass

    def visit_closure(self, c: Closure) -> None:
        pass

    def visit_primitive(self, p: Primitive) -> None:
        pass
