"""Core evaluator for the Tulip interpreter.

Every value is also a form. Literals, lambdas and builtins evaluate to
themselves, atoms are looked up, quotes yield their inner value unevaluated,
and a non-empty list is a call form.

Arguments of a call are *not* evaluated here when the head is a Builtin: the
builtin receives the raw forms and the caller's environment and decides what
to evaluate. Lambda arguments are evaluated eagerly, left to right.
"""

from __future__ import annotations

from tulip import SExpression, LispValue
from tulip.errors import TulipNotCallable, TulipTypeError
from tulip.types.builtin_fn import Builtin
from tulip.types.environment import Environment
from tulip.types.lambda_fn import Lambda
from tulip.types.quote import Quote
from tulip.types.symbol import Symbol
from tulip.types.unit import Unit, UnitType
from tulip.evaluation.apply import apply
from tulip.printer import to_string


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Quote():
            return expr.value
        case []:
            return Unit
        case [head, *tail_args] if isinstance(expr, list):
            fn = evaluate(head, env)
            if isinstance(fn, Builtin):
                return apply(fn, tail_args, env)
            if isinstance(fn, Lambda):
                args = [evaluate(arg, env) for arg in tail_args]
                return apply(fn, args, env)
            raise TulipNotCallable(f"Cannot apply non-function {to_string(fn)}")
        case bool():
            raise TulipTypeError(f"Not a Tulip value: {expr!r}")
        case UnitType() | int() | float() | str() | Builtin() | Lambda():
            return expr

    raise TulipTypeError(f"Not a Tulip value: {expr!r}")

