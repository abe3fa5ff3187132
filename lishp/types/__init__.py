"""Runtime value types for lishp."""

from lishp.types.symbol import Symbol
from lishp.types.nil import Nil, NilType
from lishp.types.pair import Pair
from lishp.types.environment import Environment
from lishp.types.closure import Closure
from lishp.types.primitive import Primitive

__all__ = ["Symbol", "Nil", "NilType", "Pair", "Environment", "Closure", "Primitive"]
