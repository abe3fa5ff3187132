from __future__ import annotations

from typing import Callable, Sequence

from lishp import LispValue
from lishp.errors import LishpArityError

PrimitiveFn = Callable[[list[LispValue]], LispValue]


class Primitive:
    """A native operation exposed as a callable value.

    The evaluator only ever invokes it with already-evaluated arguments;
    arity is checked here, operand kinds by the wrapped function.
    """

    __slots__ = ("name", "fn", "min_arity", "max_arity")

    def __init__(self, name: str, fn: PrimitiveFn, min_arity: int = 0, max_arity: int | None = None):
        self.name = name
        self.fn = fn
        self.min_arity = min_arity
        self.max_arity = max_arity

    def check_arity(self, count: int) -> None:
        if count < self.min_arity or (self.max_arity is not None and count > self.max_arity):
            raise LishpArityError(self.name, self.min_arity, self.max_arity, count)

    def __call__(self, args: Sequence[LispValue]) -> LispValue:
        args = list(args)
        self.check_arity(len(args))
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"
