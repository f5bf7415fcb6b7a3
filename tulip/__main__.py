"""CLI entry point for the Tulip interpreter.

Usage:
    python -m tulip [-v|-vv]            start the REPL
    python -m tulip [-v|-vv] <file>     evaluate every form in a source file

Options:
  -v            Increase log verbosity (can be repeated)

The REPL prompt, default log level and an optional prelude file are read from
the TULIP_PROMPT, TULIP_LOG_LEVEL and TULIP_PRELUDE_PATH environment variables.
"""

import argparse
import logging
import sys
from pathlib import Path

from tulip import config
from tulip.errors import TulipError
from tulip.interpreter import Interpreter
from tulip.repl import Repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tulip", description="Tulip Lisp interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase log verbosity (can be repeated)')
    parser.add_argument('program', nargs='?', help='source file to evaluate instead of starting the REPL')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.verbosity_to_level(args.v),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()
    if not args.program:
        Repl(interpreter).run()
        return 0

    program_file = Path(args.program)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        return 1
    source = program_file.read_text(encoding='utf-8')
    try:
        interpreter.eval(source)
    except TulipError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
