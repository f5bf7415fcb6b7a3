import pytest

from tulip.printer import to_string
from tulip.types.builtin_fn import Builtin
from tulip.types.lambda_fn import Lambda
from tulip.types.quote import Quote
from tulip.types.symbol import Symbol
from tulip.types.unit import Unit


@pytest.mark.parametrize(
    "value,expected",
    [
        (Unit, "unit"),
        (42, "42 : int"),
        (3.5, "3.5 : float"),
        ("hi", '"hi" : str'),
        (Symbol("a"), "a : atom"),
        ([], "()"),
        ([1, Symbol("a"), [2.0]], "(1 : int a : atom (2.0 : float))"),
        (Quote(Symbol("a")), "'a : atom"),
        (Quote([1]), "'(1 : int)"),
        (Lambda([Symbol("x")], Symbol("x")), "<lambda>"),
        (Builtin("+", lambda args, env: 0), "<builtin>"),
    ]
)
def test_canonical_rendering(value, expected):
    assert to_string(value) == expected


def test_rendering_of_evaluated_forms(run):
    assert to_string(run("(+ 1 2.5)")) == "3.5 : float"
    assert to_string(run("'(a \"b\")")) == '(a : atom "b" : str)'
    assert to_string(run("if")) == "<builtin>"
