from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.ast import node_to_datum
from lishp.errors import LishpMalformedNode
from lishp.types.environment import Environment


def quote_form(
    tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    """(quote datum): the operand as data, never evaluated."""
    if len(tail) != 1:
        raise LishpMalformedNode(tail, "quote expects exactly 1 operand")
    return node_to_datum(tail[0])
