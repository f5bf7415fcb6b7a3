"""
  Lisp lexer

Hand-written scanner over the raw source with a single token of lookahead.

    - `(` `)` `'`      -> single-character tokens
    - "..."            -> STRING (no escapes; newline or end of input first -> INVALID)
    - digit+           -> INTEGER
    - digit+ . digit*  -> FLOAT
    - anything else    -> SYMBOL: maximal run without whitespace or ( ) ' " ;
    - ; to end of line -> comment, skipped

Lexing never raises: malformed input becomes an INVALID token and the parser
decides how to report it.
"""

from __future__ import annotations

from typing import Iterator, Optional

from tulip.reader.token import Token, TokenKind
from tulip.types.position import Position

PUNCTUATION = frozenset("()'\";")
DIGITS = frozenset("0123456789")

_SINGLE_CHAR = {
    "'": TokenKind.QUOTE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.index = 0
        self.position = Position()
        self._peeked: Optional[Token] = None

    # --- Public API ---
    def next(self) -> Token:
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token
        return self._scan()

    def peek(self) -> Token:
        if self._peeked is None:
            self._peeked = self._scan()
        return self._peeked

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.next()
            yield token
            if token.kind is TokenKind.EOF:
                return

    # --- Scanning ---
    def _at_end(self) -> bool:
        return self.index >= len(self.source)

    def _current(self) -> str:
        return self.source[self.index]

    def _advance(self) -> None:
        self.position.advance(self.source[self.index])
        self.index += 1

    def _skip_whitespace_and_comments(self) -> None:
        # A comment may be followed by more whitespace and further comments
        while not self._at_end():
            c = self._current()
            if c.isspace():
                self._advance()
            elif c == ";":
                while not self._at_end() and self._current() != "\n":
                    self._advance()
            else:
                break

    def _scan(self) -> Token:
        self._skip_whitespace_and_comments()
        if self._at_end():
            return Token(TokenKind.EOF, self.position.copy(), "")

        c = self._current()
        if c in _SINGLE_CHAR:
            start = self.position.copy()
            self._advance()
            return Token(_SINGLE_CHAR[c], start, c)
        if c == '"':
            return self._scan_string()
        if c in DIGITS:
            return self._scan_number()
        return self._scan_symbol()

    def _scan_string(self) -> Token:
        start = self.position.copy()
        self._advance()  # opening quote
        begin = self.index
        while not self._at_end():
            c = self._current()
            if c == '"':
                lexeme = self.source[begin:self.index]
                self._advance()
                return Token(TokenKind.STRING, start, lexeme)
            if c == "\n":
                self._advance()
                return Token(TokenKind.INVALID, start, self.source[begin - 1:self.index])
            self._advance()
        return Token(TokenKind.INVALID, start, self.source[begin - 1:self.index])

    def _scan_digits(self) -> None:
        while not self._at_end() and self._current() in DIGITS:
            self._advance()

    def _scan_number(self) -> Token:
        start = self.position.copy()
        begin = self.index
        self._scan_digits()
        kind = TokenKind.INTEGER
        if not self._at_end() and self._current() == ".":
            self._advance()
            self._scan_digits()
            kind = TokenKind.FLOAT
        return Token(kind, start, self.source[begin:self.index])

    def _scan_symbol(self) -> Token:
        start = self.position.copy()
        begin = self.index
        while not self._at_end():
            c = self._current()
            if c.isspace() or c in PUNCTUATION:
                break
            self._advance()
        lexeme = self.source[begin:self.index]
        if not lexeme:
            return Token(TokenKind.INVALID, start, lexeme)
        return Token(TokenKind.SYMBOL, start, lexeme)


def lex(source: str) -> list[Token]:
    """Tokenize `source` completely; the last token is always EOF."""
    return list(Lexer(source))
