"""
  Lisp parser

Recursive-descent consumer of the Lexer's token stream. Emits the same values
the evaluator works on, so the parse tree *is* the runtime representation:

    - symbols        -> Symbol
    - integers       -> int
    - floats         -> float
    - strings        -> str
    - lists          -> Python list
    - 'expr          -> Quote(expr)
    - end of input   -> Unit
"""

from __future__ import annotations

import math
from typing import Iterator

from tulip import INT_MAX, SExpression
from tulip.errors import TulipLexError, TulipParseError
from tulip.reader.lexer import Lexer
from tulip.reader.token import Token, TokenKind
from tulip.types.quote import Quote
from tulip.types.symbol import Symbol
from tulip.types.unit import Unit


def _invalid_token_error(token: Token) -> TulipLexError:
    # INVALID string tokens keep their opening quote in the lexeme
    if token.lexeme.startswith('"'):
        if token.lexeme.endswith("\n"):
            return TulipLexError("String literal contains a newline", token.position)
        return TulipLexError("Unterminated string literal", token.position)
    return TulipLexError(f"Invalid symbol {token.lexeme!r}", token.position)


class Parser:
    def __init__(self, lexer: Lexer | str):
        self.lexer = Lexer(lexer) if isinstance(lexer, str) else lexer

    def parse(self) -> SExpression:
        """Read the next value. Returns Unit once the input is exhausted."""
        token = self.lexer.next()
        kind = token.kind

        if kind is TokenKind.LEFT_PAREN:
            return self.parse_list(token)
        if kind is TokenKind.RIGHT_PAREN:
            raise TulipParseError("Unexpected ')'", token.position)
        if kind is TokenKind.QUOTE:
            return Quote(self.parse())
        if kind is TokenKind.SYMBOL:
            return Symbol(token.lexeme)
        if kind is TokenKind.INTEGER:
            return self._parse_integer(token)
        if kind is TokenKind.FLOAT:
            return self._parse_float(token)
        if kind is TokenKind.STRING:
            return token.lexeme
        if kind is TokenKind.INVALID:
            raise _invalid_token_error(token)
        return Unit  # EOF

    def parse_list(self, opening: Token | None = None) -> list[SExpression]:
        """Read values until the matching ')'. The '(' has already been consumed."""
        items: list[SExpression] = []
        while True:
            token = self.lexer.peek()
            if token.kind is TokenKind.RIGHT_PAREN:
                self.lexer.next()
                return items
            if token.kind is TokenKind.EOF:
                where = opening.position if opening is not None else token.position
                raise TulipParseError("Unterminated list: missing ')'", where)
            if token.kind is TokenKind.INVALID:
                raise _invalid_token_error(token)
            items.append(self.parse())

    def parse_all(self) -> Iterator[SExpression]:
        """Yield every top-level value until end of input."""
        while self.lexer.peek().kind is not TokenKind.EOF:
            yield self.parse()

    @staticmethod
    def _parse_integer(token: Token) -> int:
        # Literals carry no sign, so only the upper bound can be exceeded
        digits = token.lexeme.lstrip("0") or "0"
        try:
            value = int(digits) if len(digits) <= len(str(INT_MAX)) else INT_MAX + 1
        except ValueError:
            raise TulipParseError(f"Invalid integer literal {token.lexeme!r}", token.position)
        if value > INT_MAX:
            raise TulipParseError(f"Integer literal out of range {token.lexeme!r}", token.position)
        return value

    @staticmethod
    def _parse_float(token: Token) -> float:
        try:
            value = float(token.lexeme)
        except ValueError:
            raise TulipParseError(f"Invalid float literal {token.lexeme!r}", token.position)
        if math.isinf(value):
            raise TulipParseError(f"Float literal out of range {token.lexeme!r}", token.position)
        return value


def parse(source: str) -> SExpression:
    """Parse the first value in `source` (Unit for empty input)."""
    return Parser(Lexer(source)).parse()


def parse_all(source: str) -> list[SExpression]:
    return list(Parser(Lexer(source)).parse_all())
