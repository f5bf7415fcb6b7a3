"""Line-oriented read-eval-print loop.

Each line is read, parsed and evaluated against the interpreter's persistent
root environment. Errors are reported and the loop moves on to the next line.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from tulip import config
from tulip.errors import TulipError
from tulip.interpreter import Interpreter
from tulip.printer import to_string

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        prompt: Optional[str] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.interpreter = interpreter if interpreter is not None else Interpreter(
            stdin=self.stdin, stdout=self.stdout
        )

    def eval_line(self, line: str) -> bool:
        """Evaluate one line and print each result. Returns False if it failed."""
        try:
            for result in self.interpreter.eval_each(line):
                self.stdout.write(to_string(result) + "\n")
        except TulipError as e:
            logger.debug("Evaluation of %r failed", line, exc_info=True)
            self.stderr.write(f"{e}\n")
            return False
        except RecursionError:
            logger.debug("Evaluation of %r exhausted the call stack", line)
            self.stderr.write("Maximum recursion depth exceeded\n")
            return False
        return True

    def run(self) -> None:
        """Loop until end of input."""
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n")
                return
            if line.strip():
                self.eval_line(line)
