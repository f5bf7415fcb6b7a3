import io

import pytest

from tulip.builtin.env_builtin import register
from tulip.evaluation.evaluator import evaluate
from tulip.interpreter import Interpreter
from tulip.reader.parser import Parser
from tulip.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the standard library loaded."""
    e = Environment()
    register(e, stdin=io.StringIO(""), stdout=io.StringIO())
    return e


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env` and return the last result."""
    def _run(source: str):
        result = None
        for expr in Parser(source).parse_all():
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    return Interpreter(prelude=None, stdin=io.StringIO(""), stdout=io.StringIO())
