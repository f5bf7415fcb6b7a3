from tulip import SExpression, LispValue
from tulip.evaluation.evaluator import evaluate
from tulip.errors import check_arity, TulipTypeError
from tulip.types.environment import Environment
from tulip.types.unit import UnitType


def is_truthy(value: LispValue) -> bool:
    """Unit is false; numbers are false iff zero; strings are false iff empty."""
    if isinstance(value, UnitType):
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    raise TulipTypeError("Condition must be of type int, float, string or unit")


def if_form(tail: list[SExpression], env: Environment) -> LispValue:
    """(if condition then else): only the selected branch is evaluated."""
    check_arity("if", tail, 3)
    condition, then_branch, else_branch = tail
    if is_truthy(evaluate(condition, env)):
        return evaluate(then_branch, env)
    return evaluate(else_branch, env)
