import io

import pytest

from tulip.builtin.env_builtin import build_registry, register
from tulip.builtin.registry import BuiltinRegistry
from tulip.errors import (
    TulipNotCallable,
    TulipTooFewArguments,
    TulipTooManyArguments,
    TulipTypeError,
)
from tulip.interpreter import Interpreter
from tulip.types.builtin_fn import Builtin
from tulip.types.environment import Environment
from tulip.types.symbol import Symbol
from tulip.types.unit import Unit


# -------------------------------
# Strings
# -------------------------------
def test_string_builtins(run):
    assert run('(upper "abc")') == "ABC"
    assert run('(lower "AbC")') == "abc"
    assert run("(to_str 42)") == "42 : int"
    assert run("(to_str '(1 \"a\"))") == '(1 : int "a" : str)'
    with pytest.raises(TulipTypeError):
        run("(upper 1)")


# -------------------------------
# Lists
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(head '(1 2 3))", 1),
        ("(head '())", Unit),
        ("(tail '(1 2 3))", [2, 3]),
        ("(tail '(1))", Unit),
        ("(tail '())", Unit),
        ("(range 4)", [0, 1, 2, 3]),
        ("(range 0)", []),
        ("(map (range 3) (lambda (x) (* x x)))", [0, 1, 4]),
        ('(map \'("a" "b") upper)', ["A", "B"]),
        ("(map '(a b) to_str)", ["a : atom", "b : atom"]),
        ("(zip '(1 2) '(\"a\" \"b\"))", [[1, "a"], [2, "b"]]),
        ("(fold (range 5) + 0)", 10),
        ("(fold '(1 2 3) (lambda (acc x) (* acc x)) 1)", 6),
        ("(fold '() + 7)", 7),
        ("(filter (range 6) even?)", [0, 2, 4]),
        ("(filter '(0 1 \"\" \"x\" 2.5) (lambda (v) v))", [1, "x", 2.5]),
    ]
)
def test_list_builtins(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(head 1)", TulipTypeError),
        ("(tail \"abc\")", TulipTypeError),
        ("(range 2.0)", TulipTypeError),
        ("(zip '(1) '(1 2))", TulipTypeError),
        ("(map 1 abs)", TulipTypeError),
        ("(map '(1) 1)", TulipNotCallable),
        ("(fold '(1))", TulipTooFewArguments),
        ("(head '(1) '(2))", TulipTooManyArguments),
    ]
)
def test_list_builtin_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# -------------------------------
# Stdio
# -------------------------------
def test_print_writes_to_injected_stream():
    out = io.StringIO()
    interp = Interpreter(prelude=None, stdout=out)
    assert interp.eval('(print "hi")') is Unit
    assert out.getvalue() == "hi\n"
    with pytest.raises(TulipTypeError):
        interp.eval("(print 1)")


def test_input_reads_one_line_from_injected_stream():
    interp = Interpreter(prelude=None, stdin=io.StringIO("hello\nworld\n"))
    assert interp.eval("(input)") == "hello"
    assert interp.eval("(upper (input))") == "WORLD"
    assert interp.eval("(input)") == ""
    with pytest.raises(TulipTooManyArguments):
        interp.eval("(input 1)")


# -------------------------------
# Metacircular
# -------------------------------
def test_parse_and_eval(run):
    assert run('(parse "(+ 1 2)")') == [Symbol("+"), 1, 2]
    assert run('(eval (parse "(+ 1 2)"))') == 3
    assert run("(eval '(* 2 3))") == 6
    with pytest.raises(TulipTypeError):
        run("(eval 5)")
    with pytest.raises(TulipTypeError):
        run("(parse 5)")


def test_eval_uses_calling_environment(run):
    assert run("(let (x 4) (eval '(* x x)))") == 16


# -------------------------------
# Registration
# -------------------------------
def test_register_installs_named_builtins():
    env = register(Environment())
    assert env.get("nil") is Unit
    for name in ["lambda", "let", "if", "define", "+", "==", "map", "parse", "eval"]:
        value = env.get(name)
        assert isinstance(value, Builtin)
        assert value.name == name


def test_build_registry_is_independent_per_call():
    first = build_registry(stdout=io.StringIO())
    second = build_registry(stdout=io.StringIO())
    assert first["print"] is not second["print"]
    assert "print" in first and len(first) == len(second)


def test_registry_decorator_and_install():
    registry = BuiltinRegistry()

    @registry.register("twice")
    def twice(args, env):
        return 2

    registry.constant("answer", 42)
    env = registry.install(Environment())
    assert isinstance(env.get("twice"), Builtin)
    assert env.get("twice")([], env) == 2
    assert env.get("answer") == 42
    assert list(registry) == ["twice"]
