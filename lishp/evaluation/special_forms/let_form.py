from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.ast import ListForm, SymbolRef
from lishp.errors import LishpMalformedNode
from lishp.evaluation.special_forms.begin_form import begin_form
from lishp.types.environment import Environment
from lishp.types.symbol import Symbol


def let_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (let ((name expr) ...) body...)
    Every expr is evaluated left to right in the enclosing environment, then
    all names are bound together in one new child frame where the body runs.
    """
    if not tail or not isinstance(tail[0], ListForm):
        raise LishpMalformedNode(tail, "let requires a binding list")

    names: list[Symbol] = []
    values: list[LispValue] = []
    for binding in tail[0].elements:
        match binding:
            case ListForm(elements=(SymbolRef(name=Symbol() as name), expr)):
                if name in names:
                    raise LishpMalformedNode(binding, f"duplicate binding {name}")
                names.append(name)
                values.append(evaluate_fn(expr, env))
            case _:
                raise LishpMalformedNode(binding, "let binding must be (name expr)")

    local_env = env.child()
    for name, value in zip(names, values):
        local_env.define(name, value)
    return begin_form(list(tail[1:]), local_env, evaluate_fn, is_tail_call)
