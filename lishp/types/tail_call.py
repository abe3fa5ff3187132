from lishp.types.closure import Closure
from lishp.types.environment import Environment


class TailCall:
    """A closure application deferred to the evaluator's trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
