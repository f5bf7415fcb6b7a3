from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto

from tulip.types.position import Position


class TokenKind(Enum):
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    QUOTE = auto()
    SYMBOL = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    EOF = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: Position
    lexeme: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r}) at {self.position}"
