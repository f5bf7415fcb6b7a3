# Core type aliases for Tulip's data model.
# Values are a closed set of Python types: Unit, Symbol (atoms), int, float,
# str, list, Quote, Lambda and Builtin. The same types represent both parsed
# syntax and runtime values, so `parse` and `eval` can be ordinary builtins.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Native builtin signature: (unevaluated args, calling environment) -> value
NativeFn = Callable[..., LispValue]

# Int is a signed 64-bit integer. Literals and arithmetic results outside
# this range are errors.
INT_MIN = -2**63
INT_MAX = 2**63 - 1
