"""Named native functions exposed to Lisp code."""

from __future__ import annotations

from tulip import LispValue, NativeFn


class Builtin:
    """A named native operation.

    The wrapped function receives the *unevaluated* argument values and the
    calling Environment, and decides itself whether and when to evaluate them.
    This is what lets `if`, `let` and `lambda` be ordinary builtins.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue], env) -> LispValue:
        return self.fn(args, env)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
