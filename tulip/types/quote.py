from __future__ import annotations

from tulip import SExpression


class Quote:
    """Wraps exactly one value and suppresses its evaluation."""

    __slots__ = ("value",)

    def __init__(self, value: SExpression):
        self.value: SExpression = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quote) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("quote", repr(self.value)))

    def __repr__(self) -> str:
        return f"Quote({self.value!r})"
