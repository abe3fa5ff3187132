from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, Mapping

from lishp import LispValue
from lishp.ast import is_node, to_node
from lishp.builtin.primitives import PRIMITIVES, register
from lishp.config import get_recursion_limit
from lishp.errors import LishpError
from lishp.evaluation.evaluator import evaluate
from lishp.types.environment import Environment
from lishp.types.nil import Nil
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host-facing entry point: owns a root Environment populated from a
    primitive table and evaluates AST nodes in it across calls.
    """

    def __init__(
        self,
        primitives: Mapping[Symbol, Primitive] = PRIMITIVES,
        *,
        recursion_limit: int | None = None,
    ):
        self.env: Environment = Environment()
        register(self.env, primitives)

        limit = recursion_limit if recursion_limit is not None else get_recursion_limit()
        # Only ever raise the host limit; never lower one set by the embedding program
        if sys.getrecursionlimit() < limit:
            logger.debug("Raising host recursion limit %d -> %d", sys.getrecursionlimit(), limit)
            sys.setrecursionlimit(limit)

    def eval(self, expr: Any) -> LispValue:
        """Evaluate one node; plain Python data is converted with `to_node`."""
        node = expr if is_node(expr) else to_node(expr)
        try:
            return evaluate(node, self.env)
        except LishpError as e:
            logger.debug("Evaluation failed: %s", e)
            raise

    def eval_all(self, exprs: Iterable[Any]) -> LispValue:
        """Evaluate forms in order and return the last value (Nil if none)."""
        result: LispValue = Nil
        for expr in exprs:
            result = self.eval(expr)
        return result
