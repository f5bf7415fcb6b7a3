from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Position:
    """1-based line/column of the next character the lexer will consume."""

    line: int = 1
    column: int = 1

    def advance(self, char: str) -> None:
        if char == "\n":
            self.advance_newline()
        else:
            self.column += 1

    def advance_newline(self) -> None:
        self.line += 1
        self.column = 1

    def copy(self) -> Position:
        return Position(self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
