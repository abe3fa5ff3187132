"""Application engine for lishp.

Centralises function application for the evaluator and the special forms
that call functions (`apply`):
- Closures bind their arguments in a fresh frame whose parent is the
  captured environment, then run the body. In tail position the call is
  returned as a TailCall for the trampoline instead of growing the stack.
- Primitives are invoked with the evaluated arguments and check their own
  arity and operand kinds.
- Anything else is not callable.
"""

from __future__ import annotations

from lishp import LispValue, EvaluatorFn
from lishp.errors import LishpNotCallable
from lishp.types.closure import Closure
from lishp.types.primitive import Primitive
from lishp.types.tail_call import TailCall


def resolve(result: LispValue | TailCall, evaluate_fn: EvaluatorFn) -> LispValue:
    """Run pending tail calls until a plain value is produced."""
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, True)
    return result


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool,
) -> LispValue | TailCall:
    """Apply a Closure to already-evaluated arguments.

    Raises LishpArityError unless the argument count equals the number of
    formals; there is no partial application and no padding.
    """
    new_env = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, new_env)
    return resolve(evaluate_fn(fn.body, new_env, True), evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    match head:
        case Closure():
            return apply_closure(head, args, evaluate_fn, is_tail_call)
        case Primitive():
            return head(args)
    raise LishpNotCallable(head)
