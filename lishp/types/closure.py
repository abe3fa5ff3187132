"""Closure representation and argument binding for lishp."""

from __future__ import annotations

import logging
from io import StringIO

from lishp import LispValue, Node
from lishp.errors import LishpArityError
from lishp.types.environment import Environment
from lishp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Closure:
    """A first-class function: formal parameters, a body node and the
    environment in effect where it was created.

    Closures compare equal only by identity.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(
        self,
        formals: tuple[Symbol, ...],
        body: Node,
        env: Environment,
    ):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: Node = body
        # Captured by reference, never copied
        self.env: Environment = env
        logger.debug("Closure created: %d formal(s), env=%#x", len(self.formals), id(env))

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a new frame whose parent is the
        captured environment (never the caller's frame).

        Raises LishpArityError unless exactly one argument per formal is given.
        """
        if len(args) != self.arity:
            raise LishpArityError(str(self), self.arity, self.arity, len(args))
        local_env = self.env.child()
        for formal, arg in zip(self.formals, args):
            local_env.define(formal, arg)
        return local_env
