from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.types.environment import Environment
from lishp.types.value import is_truthy


def and_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsy value
    (Nil or #f) is found, which is returned immediately. If all operands are
    truthy, returns the value of the last operand. With zero operands, returns #t.
    """
    if not tail:
        return True

    last_index = len(tail) - 1
    for i, expr in enumerate(tail):
        if i == last_index:
            return evaluate_fn(expr, env, is_tail_call)
        val = evaluate_fn(expr, env)
        if not is_truthy(val):
            return val


def or_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value, or the value of the last operand if none before it is truthy.
    With zero operands, returns #f.
    """
    if not tail:
        return False

    last_index = len(tail) - 1
    for i, expr in enumerate(tail):
        if i == last_index:
            return evaluate_fn(expr, env, is_tail_call)
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return False
