# Core type aliases for the lishp data model.
# Atoms use plain Python types (bool, int, float, str) next to the runtime
# classes in lishp.types (Symbol, Nil, Pair, Closure, Primitive).
#
# Naming guidance:
# - LispValue: use in evaluator/runtime code to denote evaluated values.
# - Node:      use in evaluator code for AST nodes (see lishp.ast).
# Both resolve to `Any`; the closed set of value kinds is enforced by
# lishp.types.value.is_value and the evaluator's pattern matching.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# AST node alias (Literal | SymbolRef | ListForm)
Node = Any

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., LispValue]
