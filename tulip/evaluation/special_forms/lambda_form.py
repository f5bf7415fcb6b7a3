from tulip import SExpression, LispValue
from tulip.errors import TulipInvalidLambda, TulipTooFewArguments
from tulip.types.environment import Environment
from tulip.types.lambda_fn import Lambda


def lambda_form(tail: list[SExpression], env: Environment) -> LispValue:
    # (lambda (params) body ...): only the first body form is kept, and nothing
    # is evaluated here. Parameters are validated when the lambda is applied.
    if len(tail) < 2:
        raise TulipTooFewArguments("lambda requires a parameter list and a body")

    params, body = tail[0], tail[1]
    if not isinstance(params, list):
        raise TulipInvalidLambda("lambda parameters must be a list")
    return Lambda.capture(list(params), body, env)
