from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.types.environment import Environment
from lishp.types.nil import Nil


def begin_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env, is_tail_call)
