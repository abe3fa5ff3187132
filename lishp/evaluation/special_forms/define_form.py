from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.ast import SymbolRef
from lishp.errors import LishpMalformedNode
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.symbol import Symbol


def define_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and always returns Nil. The value is
    evaluated before the binding exists, so a recursive lambda sees its own
    name when called, not when created.
    """
    if len(tail) != 2:
        raise LishpMalformedNode(tail, "define requires exactly 2 operands")

    name_node, val_expr = tail
    if not isinstance(name_node, SymbolRef) or not isinstance(name_node.name, Symbol):
        raise LishpMalformedNode(name_node, "define expects a symbol name")
    value = evaluate_fn(val_expr, env)
    env.define(name_node.name, value)
    return Nil
