"""Error taxonomy for the lishp evaluator.

Every error raised by the core derives from LishpError and carries the
structured fields a host needs to report it. Errors are fail-fast: they abort
the current evaluation and surface unchanged to the caller of `evaluate`.
"""

from __future__ import annotations

from typing import Any

# Longest rendering of an offending value kept in an error message
_MAX_SHOWN = 60


def describe(value: Any) -> str:
    """Short, cycle-safe text for a value or node named in an error message."""
    from lishp.printer import to_lisp_string
    from lishp.types.value import is_value

    text = to_lisp_string(value) if is_value(value) else repr(value)
    if len(text) > _MAX_SHOWN:
        text = text[:_MAX_SHOWN - 3] + "..."
    return text


class LishpError(Exception):
    """ Base class for all lishp errors"""
    pass


class LishpInvalidSymbol(LishpError):
    """ Raised when a non-symbol is used as a binding name"""
    pass


class LishpUnboundName(LishpError):
    """ Raised when a lookup exhausts the environment chain"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound name: {name}")
        self.name = name


class LishpNotCallable(LishpError):
    """ Raised when the head of an application is neither a closure nor a primitive"""

    def __init__(self, value: Any):
        super().__init__(f"Not callable: {describe(value)}")
        self.value = value


class LishpArityError(LishpError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, callee: str, minimum: int, maximum: int | None, got: int):
        self.callee = callee
        self.minimum = minimum
        self.maximum = maximum
        self.got = got
        super().__init__(f"{callee} expects {self.expected} argument(s), got {got}")

    @property
    def expected(self) -> str:
        if self.maximum is None:
            return f"at least {self.minimum}"
        if self.minimum == self.maximum:
            return str(self.minimum)
        return f"{self.minimum} to {self.maximum}"


class LishpTypeError(LishpError):
    """ Raised when an operand is of the wrong kind"""

    def __init__(self, expected: str, value: Any, operation: str | None = None):
        from lishp.types.value import kind_of

        self.expected = expected
        self.value = value
        self.operation = operation
        self.actual = kind_of(value)
        where = f"{operation}: " if operation else ""
        super().__init__(f"{where}expected {expected}, got {self.actual} {describe(value)}")


class LishpArithmeticError(LishpError):
    """ Base class for numeric faults raised by primitives"""
    pass


class LishpDivisionByZero(LishpArithmeticError):
    def __init__(self, operation: str):
        super().__init__(f"{operation}: division by zero")
        self.operation = operation


class LishpOverflowError(LishpArithmeticError):
    """ Raised when an integer result leaves the signed 64-bit range"""

    def __init__(self, operation: str, result: int):
        super().__init__(f"{operation}: integer overflow ({result})")
        self.operation = operation
        self.result = result


class LishpMalformedNode(LishpError):
    """ Raised when an AST node violates the node-shape contract"""

    def __init__(self, node: Any, reason: str = "unrecognised node"):
        super().__init__(f"Malformed node ({reason}): {describe(node)}")
        self.node = node
        self.reason = reason


class LishpRecursionError(LishpError):
    """ Raised when evaluation exhausts the host recursion budget"""

    def __init__(self, limit: int):
        super().__init__(f"Recursion depth exceeded (host limit {limit})")
        self.limit = limit
