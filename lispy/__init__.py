# Core type aliases for Lispy's data model.
# Numbers and strings are plain Python floats and strs; every other variant
# (Symbol, Error, SExpr, QExpr, Builtin, Lambda) is a small class under
# lispy.types.
#
# Naming guidance:
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# - BuiltinFn:  Signature of a native operation registered in lispy.builtin.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Native operation: receives the calling environment and its argument list
BuiltinFn = Callable[..., LispValue]

__version__ = "0.1.0"
