from tulip import SExpression, LispValue
from tulip.evaluation.evaluator import evaluate
from tulip.errors import check_arity, TulipTypeError
from tulip.types.environment import Environment
from tulip.types.symbol import Symbol


def let_form(tail: list[SExpression], env: Environment) -> LispValue:
    """
    (let (name value-expr) body)
    value-expr is evaluated in the calling environment; body sees a fresh scope
    holding the single binding, parented to the calling environment.
    """
    check_arity("let", tail, 2)
    binding, body = tail
    if not isinstance(binding, list):
        raise TulipTypeError("let binding must be a list of the form (name value)")
    if len(binding) != 2:
        raise TulipTypeError("let binding must have exactly two elements")
    name, value_expr = binding
    if not isinstance(name, Symbol):
        raise TulipTypeError("let binding name must be an atom")

    value = evaluate(value_expr, env)
    scope = Environment(outer=env)
    scope.set(name, value)
    return evaluate(body, scope)
