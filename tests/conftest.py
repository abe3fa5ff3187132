import pytest

from lishp.interpreter import Interpreter
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol


@pytest.fixture
def interp():
    """Interpreter with the standard primitive table."""
    return Interpreter()


@pytest.fixture
def effects(interp):
    """Bind (record! x) in the interpreter: appends x to the returned list and returns x.

    Used to observe evaluation order and short-circuiting.
    """
    log = []

    def record(args):
        log.append(args[0])
        return args[0]

    interp.env.define(Symbol("record!"), Primitive("record!", record, 1, 1))
    return log
