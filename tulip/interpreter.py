from __future__ import annotations

import logging
from typing import Literal, Optional, TextIO

from tulip import LispValue
from tulip import config
from tulip.builtin.env_builtin import register
from tulip.evaluation.evaluator import evaluate
from tulip.reader.parser import Parser
from tulip.types.environment import Environment
from tulip.types.unit import Unit

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Tulip code against a persistent root Environment.
    Bindings made by earlier successful evaluations survive later failures.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.env: Environment = Environment()
        register(self.env, stdin=stdin, stdout=stdout)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_path()
            if path is not None:
                logger.info("Loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in Parser(code).parse_all():
            evaluate(expr, self.env)

    def eval_each(self, code: str):
        """Evaluate the top-level forms of `code` one at a time, yielding each result."""
        for expr in Parser(code).parse_all():
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form and return the last result (unit if none)."""
        result: LispValue = Unit
        for result in self.eval_each(code):
            pass
        return result
