"""Application engine for Tulip.

- Lambdas: exact arity check, parameter validation, then the body is evaluated
  in a fresh call scope. The call scope is parented to the caller's environment
  and pre-seeded with the lambda's captured bindings, so every invocation has
  its own parameter frame and recursive calls cannot clobber each other.
- Builtins: the native function gets the raw argument list and the caller's env.
"""

from __future__ import annotations

from tulip import LispValue
from tulip.errors import (
    TulipInvalidLambda,
    TulipNotCallable,
    TulipTooFewArguments,
    TulipTooManyArguments,
)
from tulip.types.builtin_fn import Builtin
from tulip.types.environment import Environment
from tulip.types.lambda_fn import Lambda
from tulip.types.symbol import Symbol


def apply_lambda(fn: Lambda, args: list[LispValue], caller_env: Environment) -> LispValue:
    """Apply a Lambda to already-evaluated arguments."""
    from tulip.evaluation.evaluator import evaluate

    arity = len(fn.formals)
    if len(args) < arity:
        raise TulipTooFewArguments(
            f"Too few arguments: expected {arity}, got {len(args)}"
        )
    if len(args) > arity:
        raise TulipTooManyArguments(
            f"Too many arguments: expected {arity}, got {len(args)}"
        )

    call_env = Environment(outer=caller_env)
    call_env.combine(fn.env)
    for param, arg in zip(fn.formals, args):
        if not isinstance(param, Symbol):
            raise TulipInvalidLambda(f"Lambda parameter must be an atom, got {param!r}")
        call_env.set(param, arg)
    return evaluate(fn.body, call_env)


def apply(head: Lambda | Builtin | object, args: list[LispValue], env: Environment) -> LispValue:
    """Apply either a Lambda or a Builtin.

    For a Builtin, `args` are the unevaluated forms; for a Lambda they must
    already be evaluated.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env)
    if isinstance(head, Builtin):
        return head(args, env)
    raise TulipNotCallable(f"Cannot apply non-function {head!r}")
