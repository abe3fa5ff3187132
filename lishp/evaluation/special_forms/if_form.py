from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.errors import LishpMalformedNode
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.value import is_truthy


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise LishpMalformedNode(tail, "if requires a condition, a then-expression and an optional else")

    cond = evaluate_fn(tail[0], env)
    # Only the selected branch is evaluated
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, is_tail_call)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, is_tail_call)
    else:
        return Nil
