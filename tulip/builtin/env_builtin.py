"""Built-in functions for the Tulip runtime environment.

This module defines the standard library exposed to Lisp code: arithmetic,
comparison, number and string helpers, list processing, stdio and the
metacircular `parse`/`eval` pair, plus `register` to install them.

Every builtin receives its arguments unevaluated. Apart from the special
forms, they all start by evaluating their arguments left to right in the
calling environment.
"""
from __future__ import annotations

import math
import sys
from functools import partial
from typing import Callable, Optional, TextIO

from tulip import INT_MAX, INT_MIN, LispValue, SExpression
from tulip.builtin.registry import BuiltinRegistry
from tulip.errors import (
    check_arity,
    TulipNotCallable,
    TulipOverflowError,
    TulipTypeError,
    TulipZeroDivisionError,
)
from tulip.evaluation.apply import apply as apply_engine
from tulip.evaluation.evaluator import evaluate
from tulip.evaluation.special_forms import SPECIAL_FORMS, is_truthy
from tulip.printer import to_string
from tulip.reader.parser import Parser
from tulip.types.builtin_fn import Builtin
from tulip.types.environment import Environment
from tulip.types.lambda_fn import Lambda
from tulip.types.quote import Quote
from tulip.types.unit import Unit, UnitType

TRUE = 1
FALSE = 0


def eval_args(args: list[SExpression], env: Environment) -> list[LispValue]:
    return [evaluate(arg, env) for arg in args]


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: LispValue) -> str:
    """Short Lisp-level name of a value's variant, used in error messages."""
    if isinstance(value, UnitType):
        return "unit"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, Quote):
        return "quote"
    if isinstance(value, Lambda):
        return "lambda"
    if isinstance(value, Builtin):
        return "builtin"
    return "atom"


def call(fn: LispValue, values: list[LispValue], env: Environment) -> LispValue:
    """Call `fn` with already-evaluated `values`.

    Builtins evaluate their own arguments, so values are handed to them quoted
    to keep atoms and lists from being evaluated a second time.
    """
    if isinstance(fn, Builtin):
        return apply_engine(fn, [Quote(v) for v in values], env)
    if isinstance(fn, Lambda):
        return apply_engine(fn, values, env)
    raise TulipNotCallable(f"Cannot apply non-function {to_string(fn)}")


def _expect_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise TulipTypeError(f"{name}: expected a list, got {type_name(value)}")
    return value


def _expect_string(name: str, value: LispValue) -> str:
    if not isinstance(value, str):
        raise TulipTypeError(f"{name}: expected a string, got {type_name(value)}")
    return value


def _expect_numbers(name: str, lhs: LispValue, rhs: LispValue) -> None:
    if not (is_number(lhs) and is_number(rhs)):
        raise TulipTypeError(
            f"{name}: cannot combine {type_name(lhs)} and {type_name(rhs)}"
        )


def _check_int(name: str, value: LispValue) -> LispValue:
    if isinstance(value, int) and not INT_MIN <= value <= INT_MAX:
        raise TulipOverflowError(f"{name}: integer overflow")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(name: str, op: Callable[[LispValue, LispValue], LispValue]):
    """Wrap a binary numeric operation with operand checking.

    int op int stays int and must fit in 64 bits; any float operand promotes
    the result to float.
    """
    def binary(lhs: LispValue, rhs: LispValue) -> LispValue:
        _expect_numbers(name, lhs, rhs)
        return _check_int(name, op(lhs, rhs))
    return binary


def _divide(lhs: LispValue, rhs: LispValue) -> LispValue:
    _expect_numbers("/", lhs, rhs)
    if rhs == 0:
        raise TulipZeroDivisionError("Division by zero")
    if isinstance(lhs, int) and isinstance(rhs, int):
        # Integer division truncates toward zero
        quotient = abs(lhs) // abs(rhs)
        return _check_int("/", quotient if (lhs >= 0) == (rhs > 0) else -quotient)
    return lhs / rhs


_add = _checked("+", lambda a, b: a + b)
_sub = _checked("-", lambda a, b: a - b)
_mul = _checked("*", lambda a, b: a * b)


def _fold_numeric(op, identity: int, args: list[SExpression], env: Environment) -> LispValue:
    values = eval_args(args, env)
    if not values:
        return identity
    result = op(values[0], identity)
    for value in values[1:]:
        result = op(result, value)
    return result


def add(args: list[SExpression], env: Environment) -> LispValue:
    """(+ n ...) sum of all arguments; 0 when called with none."""
    return _fold_numeric(_add, 0, args, env)


def mul(args: list[SExpression], env: Environment) -> LispValue:
    """(* n ...) product of all arguments; 1 when called with none."""
    return _fold_numeric(_mul, 1, args, env)


def sub(args: list[SExpression], env: Environment) -> LispValue:
    check_arity("-", args, 2)
    lhs, rhs = eval_args(args, env)
    return _sub(lhs, rhs)


def div(args: list[SExpression], env: Environment) -> LispValue:
    check_arity("/", args, 2)
    lhs, rhs = eval_args(args, env)
    return _divide(lhs, rhs)


# -------------------------------
# Comparison
# -------------------------------
def values_equal(lhs: LispValue, rhs: LispValue) -> bool:
    """Equality over int, float, string and unit. Unit equals only unit."""
    # Unit compares unequal to any other value on either side instead of raising
    if isinstance(lhs, UnitType) or isinstance(rhs, UnitType):
        return isinstance(lhs, UnitType) and isinstance(rhs, UnitType)
    if is_number(lhs):
        if is_number(rhs):
            return lhs == rhs
        raise TulipTypeError(f"Cannot compare {type_name(lhs)} and {type_name(rhs)}")
    if isinstance(lhs, str):
        if isinstance(rhs, str):
            return lhs == rhs
        raise TulipTypeError(f"Cannot compare string and {type_name(rhs)}")
    raise TulipTypeError("Only numeric, string and unit values can be compared")


def equals(args: list[SExpression], env: Environment) -> int:
    check_arity("==", args, 2)
    lhs, rhs = eval_args(args, env)
    return TRUE if values_equal(lhs, rhs) else FALSE


def not_equals(args: list[SExpression], env: Environment) -> int:
    check_arity("!=", args, 2)
    lhs, rhs = eval_args(args, env)
    return FALSE if values_equal(lhs, rhs) else TRUE


def _ordering(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(args: list[SExpression], env: Environment) -> int:
        check_arity(name, args, 2)
        lhs, rhs = eval_args(args, env)
        if not (is_number(lhs) and is_number(rhs)):
            raise TulipTypeError(f"{name}: cannot compare {type_name(lhs)} and {type_name(rhs)}")
        return TRUE if op(lhs, rhs) else FALSE
    compare.__name__ = f"compare_{name}"
    return compare


lt = _ordering("<", lambda a, b: a < b)
gt = _ordering(">", lambda a, b: a > b)
lte = _ordering("<=", lambda a, b: a <= b)
gte = _ordering(">=", lambda a, b: a >= b)


# -------------------------------
# Numbers
# -------------------------------
def _one_number(name: str, args: list[SExpression], env: Environment) -> LispValue:
    check_arity(name, args, 1)
    (value,) = eval_args(args, env)
    if not is_number(value):
        raise TulipTypeError(f"{name}: argument must be an int or float")
    return value


def abs_builtin(args: list[SExpression], env: Environment) -> LispValue:
    return _check_int("abs", abs(_one_number("abs", args, env)))


def _whole_part(name: str, args: list[SExpression], env: Environment) -> int:
    value = _one_number(name, args, env)
    if isinstance(value, float) and not math.isfinite(value):
        raise TulipTypeError(f"{name}: argument must be finite, got {value!r}")
    return int(value)


def is_odd(args: list[SExpression], env: Environment) -> int:
    return TRUE if _whole_part("odd?", args, env) % 2 != 0 else FALSE


def is_even(args: list[SExpression], env: Environment) -> int:
    return TRUE if _whole_part("even?", args, env) % 2 == 0 else FALSE


# -------------------------------
# Strings
# -------------------------------
def upper(args: list[SExpression], env: Environment) -> str:
    check_arity("upper", args, 1)
    (value,) = eval_args(args, env)
    return _expect_string("upper", value).upper()


def lower(args: list[SExpression], env: Environment) -> str:
    check_arity("lower", args, 1)
    (value,) = eval_args(args, env)
    return _expect_string("lower", value).lower()


def to_str(args: list[SExpression], env: Environment) -> str:
    check_arity("to_str", args, 1)
    (value,) = eval_args(args, env)
    return to_string(value)


# -------------------------------
# List operations
# -------------------------------
def head(args: list[SExpression], env: Environment) -> LispValue:
    """(head list) first element, or unit for the empty list."""
    check_arity("head", args, 1)
    (value,) = eval_args(args, env)
    items = _expect_list("head", value)
    return items[0] if items else Unit


def tail(args: list[SExpression], env: Environment) -> LispValue:
    """(tail list) everything after the first element, or unit when nothing is left."""
    check_arity("tail", args, 1)
    (value,) = eval_args(args, env)
    rest = _expect_list("tail", value)[1:]
    return rest if rest else Unit


def range_builtin(args: list[SExpression], env: Environment) -> list[int]:
    check_arity("range", args, 1)
    (n,) = eval_args(args, env)
    if not isinstance(n, int) or isinstance(n, bool):
        raise TulipTypeError(f"range: argument must be an int, got {type_name(n)}")
    return list(range(n))


def map_builtin(args: list[SExpression], env: Environment) -> list[LispValue]:
    """(map list fn)"""
    check_arity("map", args, 2)
    items, fn = eval_args(args, env)
    return [call(fn, [item], env) for item in _expect_list("map", items)]


def zip_builtin(args: list[SExpression], env: Environment) -> list[LispValue]:
    """(zip list list) pairs up elements of two equally long lists."""
    check_arity("zip", args, 2)
    left, right = eval_args(args, env)
    left, right = _expect_list("zip", left), _expect_list("zip", right)
    if len(left) != len(right):
        raise TulipTypeError("zip: lists must be of equal size")
    return [[a, b] for a, b in zip(left, right)]


def fold(args: list[SExpression], env: Environment) -> LispValue:
    """(fold list fn init) left fold calling (fn acc item)."""
    check_arity("fold", args, 3)
    items, fn, acc = eval_args(args, env)
    for item in _expect_list("fold", items):
        acc = call(fn, [acc, item], env)
    return acc


def filter_builtin(args: list[SExpression], env: Environment) -> list[LispValue]:
    """(filter list fn) keeps the items for which fn returns a truthy value."""
    check_arity("filter", args, 2)
    items, fn = eval_args(args, env)
    return [item for item in _expect_list("filter", items) if is_truthy(call(fn, [item], env))]


# -------------------------------
# Stdio
# -------------------------------
def print_builtin(args: list[SExpression], env: Environment, *, stdout: TextIO) -> LispValue:
    check_arity("print", args, 1)
    (value,) = eval_args(args, env)
    stdout.write(_expect_string("print", value) + "\n")
    stdout.flush()
    return Unit


def input_builtin(args: list[SExpression], env: Environment, *, stdin: TextIO) -> str:
    check_arity("input", args, 0)
    line = stdin.readline()
    return line[:-1] if line.endswith("\n") else line


# -------------------------------
# Metacircular
# -------------------------------
def parse_builtin(args: list[SExpression], env: Environment) -> SExpression:
    """(parse "source") reads the first value of a string without evaluating it."""
    check_arity("parse", args, 1)
    (source,) = eval_args(args, env)
    return Parser(_expect_string("parse", source)).parse()


def eval_builtin(args: list[SExpression], env: Environment) -> LispValue:
    """(eval form) evaluates a list value in the calling environment."""
    check_arity("eval", args, 1)
    (form,) = eval_args(args, env)
    return evaluate(_expect_list("eval", form), env)


# -------------------------------
# Registration
# -------------------------------
def build_registry(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> BuiltinRegistry:
    """Create the standard library. I/O builtins are bound to the given streams."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    registry = BuiltinRegistry()
    registry.constant("nil", Unit)
    for name, form in SPECIAL_FORMS.items():
        registry.add(name, form)

    for name, fn in {
        "map": map_builtin,
        "zip": zip_builtin,
        "fold": fold,
        "filter": filter_builtin,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "==": equals,
        "!=": not_equals,
        "<": lt,
        ">": gt,
        "<=": lte,
        ">=": gte,
        "abs": abs_builtin,
        "odd?": is_odd,
        "even?": is_even,
        "upper": upper,
        "lower": lower,
        "to_str": to_str,
        "head": head,
        "tail": tail,
        "range": range_builtin,
        "print": partial(print_builtin, stdout=stdout),
        "input": partial(input_builtin, stdin=stdin),
        "parse": parse_builtin,
        "eval": eval_builtin,
    }.items():
        registry.add(name, fn)
    return registry


def register(
    env: Environment, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> Environment:
    """Install the standard library into `env` (normally a fresh root scope)."""
    return build_registry(stdin, stdout).install(env)
