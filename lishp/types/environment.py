"""Runtime environment for lishp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: every
closure created while a frame is current keeps that frame alive, and a
`define` into the frame is visible to all of them. Frames only ever grow;
bindings are never removed and a child never writes into an ancestor.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from lishp import LispValue
from lishp.errors import LishpInvalidSymbol, LishpUnboundName
from lishp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any binding here.

        Raises LishpInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LishpInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def child(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def is_bound(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LishpUnboundName if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LishpUnboundName(name)
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; root frames are summarised."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None:
                    chain.append(f"<root: {len(env.vars)} bindings>")
                else:
                    frame_buf = StringIO()
                    env._write_vars(frame_buf)
                    chain.append(frame_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
