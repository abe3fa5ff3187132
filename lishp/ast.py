"""AST node contract consumed by the evaluator.

The parser that produces these nodes lives outside the core. Three node
shapes exist:

- Literal:   wraps a self-evaluating value (Nil, booleans, numbers, strings).
- SymbolRef: a name, resolved through the environment.
- ListForm:  an ordered sequence of nodes; the head decides between a special
             form and an application. The empty form `()` evaluates to Nil.

`to_node` builds nodes from nested Python data, which is handy for hosts and
tests that have no parser at hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lishp import LispValue, Node
from lishp.errors import LishpMalformedNode
from lishp.types.nil import Nil
from lishp.types.pair import Pair, from_iterable
from lishp.types.symbol import Symbol
from lishp.types.value import is_value


@dataclass(frozen=True)
class Literal:
    value: LispValue

    def __str__(self) -> str:
        from lishp.printer import to_lisp_string
        return to_lisp_string(self.value)


@dataclass(frozen=True)
class SymbolRef:
    name: Symbol

    def __str__(self) -> str:
        return str(self.name)


@dataclass(frozen=True)
class ListForm:
    elements: tuple = ()

    @property
    def head(self) -> Node | None:
        return self.elements[0] if self.elements else None

    @property
    def args(self) -> tuple:
        return self.elements[1:]

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self.elements) + ")"


def is_node(obj: Any) -> bool:
    return isinstance(obj, (Literal, SymbolRef, ListForm))


def to_node(expr: Any) -> Node:
    """Convert nested Python data into AST nodes.

    Symbols become SymbolRef, lists/tuples become ListForm, existing nodes
    pass through and anything else is wrapped in a Literal. Pairs are not
    accepted: they are runtime data, reachable only through `quote`.
    """
    match expr:
        case Literal() | SymbolRef() | ListForm():
            return expr
        case Symbol():
            return SymbolRef(expr)
        case list() | tuple():
            return ListForm(tuple(to_node(e) for e in expr))
        case Pair():
            raise LishpMalformedNode(expr, "pairs cannot appear in source")
    if not is_value(expr):
        raise LishpMalformedNode(expr, "not a literal value")
    return Literal(expr)


def node_to_datum(node: Node) -> LispValue:
    """Reinterpret a node as quoted data without evaluating anything."""
    match node:
        case Literal(value=value):
            if not is_value(value):
                raise LishpMalformedNode(node, "literal does not wrap a value")
            return value
        case SymbolRef(name=name):
            return name
        case ListForm(elements=elements):
            if not elements:
                return Nil
            return from_iterable(node_to_datum(e) for e in elements)
    raise LishpMalformedNode(node)
