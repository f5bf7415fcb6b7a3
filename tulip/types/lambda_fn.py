"""Lambda function representation and closure capture for Tulip."""

from __future__ import annotations

import logging

from tulip import SExpression
from tulip.types.environment import Environment
from tulip.types.quote import Quote
from tulip.types.symbol import Symbol

logger = logging.getLogger(__name__)


def free_atoms(expr: SExpression) -> list[Symbol]:
    """Return every atom occurring in `expr`, in order of first occurrence.

    Recurses into lists, quoted values and the bodies of lambda values.
    """
    seen: dict[Symbol, None] = {}

    def walk(e: SExpression) -> None:
        if isinstance(e, Symbol):
            seen.setdefault(e, None)
        elif isinstance(e, Quote):
            walk(e.value)
        elif isinstance(e, Lambda):
            walk(e.body)
        elif isinstance(e, list):
            for item in e:
                walk(item)

    walk(expr)
    return list(seen)


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env.

    The closure env holds only the bindings captured at construction time.
    It is never written to by a call: each application builds its own scope.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[SExpression], body: SExpression, env: Environment | None = None
    ):
        self.formals: list[SExpression] = formals
        self.body: SExpression = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    @classmethod
    def capture(
        cls, formals: list[SExpression], body: SExpression, defining_env: Environment
    ) -> Lambda:
        """Build a Lambda whose closure holds the atoms of `body` bound in `defining_env`.

        Atoms that are not bound yet are left out; they may still resolve at call time.
        """
        closure = Environment()
        for atom in free_atoms(body):
            value = defining_env.get(atom)
            if value is not None:
                closure.set(atom, value)
        logger.debug(
            "Closure created: params=(%s), captured=[%s]",
            " ".join(str(f) for f in formals),
            ", ".join(str(k) for k in closure),
        )
        return cls(formals, body, closure)

    def __str__(self) -> str:
        return "(lambda (" + " ".join(str(f) for f in self.formals) + f") {self.body!r})"

    def __repr__(self) -> str:
        return str(self)
