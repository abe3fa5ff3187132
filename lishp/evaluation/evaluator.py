"""Core evaluator and trampoline for the lishp interpreter.

Reduces an AST node in an environment to a value. Dispatch is tried in
order: literal, symbol reference, empty form, special form, application.
Closure calls in tail position come back as TailCall objects which the
outermost `evaluate` (or a non-tail application) runs to completion.
"""

from __future__ import annotations

import logging
import sys

from lishp import LispValue, Node
from lishp.ast import Literal, ListForm, SymbolRef
from lishp.errors import LishpMalformedNode, LishpRecursionError
from lishp.evaluation.apply import apply, resolve
from lishp.evaluation.special_forms import SPECIAL_FORMS
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.symbol import Symbol
from lishp.types.tail_call import TailCall
from lishp.types.value import is_value

logger = logging.getLogger(__name__)


def evaluate(node: Node, env: Environment) -> LispValue:
    """
    Trampoline evaluator: evaluates `node` in `env` to a value.

    Errors propagate unchanged, except host stack exhaustion which is
    reported as LishpRecursionError.
    """
    try:
        return resolve(evaluate0(node, env, True), evaluate0)
    except RecursionError:
        limit = sys.getrecursionlimit()
        logger.debug("Host recursion limit %d exhausted", limit)
        raise LishpRecursionError(limit) from None


def evaluate0(
    node: Node,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns a TailCall only when `is_tail_call` is set.
    """
    match node:
        case Literal(value=value):
            if not is_value(value):
                raise LishpMalformedNode(node, "literal does not wrap a value")
            return value

        case SymbolRef(name=name):
            if not isinstance(name, Symbol):
                raise LishpMalformedNode(node, "symbol reference without a Symbol")
            return env.lookup(name)

        case ListForm(elements=()):
            return Nil

        case ListForm(elements=(SymbolRef(name=Symbol() as keyword), *operands)) if keyword in SPECIAL_FORMS:
            return SPECIAL_FORMS[keyword](operands, env, evaluate0, is_tail_call)

        case ListForm(elements=(head, *operands)):
            fn = evaluate0(head, env)
            # Left to right, in the caller's environment
            args = [evaluate0(arg, env) for arg in operands]
            return apply(fn, args, evaluate0, is_tail_call)

    raise LishpMalformedNode(node)
