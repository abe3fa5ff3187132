from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.errors import LishpMalformedNode, LishpTypeError
from lishp.evaluation.apply import apply as apply_engine
from lishp.types.environment import Environment
from lishp.types.pair import to_list
from lishp.types.tail_call import TailCall


def apply_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    (apply fn args)
    Calls `fn` with the elements of the proper list `args`, through the same
    engine as an ordinary application.
    """
    if len(tail) != 2:
        raise LishpMalformedNode(tail, "apply expects a function and an argument list")

    fn_expr, args_expr = tail
    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)
    try:
        args = to_list(args_val)
    except ValueError:
        raise LishpTypeError("proper list", args_val, "apply") from None
    return apply_engine(fn_val, args, evaluate_fn, is_tail_call)
