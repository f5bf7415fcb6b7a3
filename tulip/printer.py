"""Canonical textual rendering of Tulip values, as shown by the REPL."""

from __future__ import annotations

from tulip import LispValue
from tulip.types.builtin_fn import Builtin
from tulip.types.lambda_fn import Lambda
from tulip.types.quote import Quote
from tulip.types.symbol import Symbol
from tulip.types.unit import UnitType


def to_string(value: LispValue) -> str:
    if isinstance(value, UnitType):
        return "unit"
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, int):
        return f"{value} : int"
    if isinstance(value, float):
        return f"{value!r} : float"
    if isinstance(value, str):
        return f'"{value}" : str'
    if isinstance(value, Symbol):
        return f"{value} : atom"
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, Quote):
        return "'" + to_string(value.value)
    if isinstance(value, Lambda):
        return "<lambda>"
    if isinstance(value, Builtin):
        return "<builtin>"
    return repr(value)
