from tulip import SExpression, LispValue
from tulip.evaluation.evaluator import evaluate
from tulip.errors import check_arity, TulipTypeError
from tulip.types.environment import Environment
from tulip.types.symbol import Symbol
from tulip.types.unit import Unit


def define_form(tail: list[SExpression], env: Environment) -> LispValue:
    """
    (define name value)
    Evaluates value and binds it in the calling scope (never an outer one).
    """
    check_arity("define", tail, 2)
    name, value_expr = tail
    if not isinstance(name, Symbol):
        raise TulipTypeError("define name must be an atom")
    env.set(name, evaluate(value_expr, env))
    return Unit
