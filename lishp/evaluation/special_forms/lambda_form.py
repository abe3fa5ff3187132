from __future__ import annotations

from lishp import Node, LispValue, EvaluatorFn
from lishp.ast import ListForm, Literal, SymbolRef
from lishp.errors import LishpMalformedNode
from lishp.types.closure import Closure
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.symbol import Symbol


def parse_formals(params: Node) -> tuple[Symbol, ...]:
    if not isinstance(params, ListForm):
        raise LishpMalformedNode(params, "lambda parameters must be a list")
    formals: list[Symbol] = []
    for p in params.elements:
        if not isinstance(p, SymbolRef) or not isinstance(p.name, Symbol):
            raise LishpMalformedNode(p, "lambda parameter must be a symbol")
        if p.name in formals:
            raise LishpMalformedNode(p, f"duplicate parameter {p.name}")
        formals.append(p.name)
    return tuple(formals)


def body_node(body_forms: list[Node]) -> Node:
    """Collapse a body into one node; several forms become an implicit begin."""
    if not body_forms:
        return Literal(Nil)
    if len(body_forms) == 1:
        return body_forms[0]
    return ListForm((SymbolRef(Symbol("begin")), *body_forms))


def lambda_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    # (lambda (params) body...): zero or more body forms. With none, calling
    # the function returns Nil.
    if not tail:
        raise LishpMalformedNode(tail, "lambda requires at least a parameter list")

    formals = parse_formals(tail[0])
    return Closure(formals, body_node(list(tail[1:])), env)
