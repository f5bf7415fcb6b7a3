from __future__ import annotations


class TulipError(Exception):
    """ Base class for all Tulip errors"""
    pass


class TulipSyntaxError(TulipError):
    """ Raised when source text cannot be read into a value"""

    def __init__(self, message: str, position=None):
        if position is not None:
            message = f"{position}: {message}"
        super().__init__(message)
        self.position = position


class TulipLexError(TulipSyntaxError):
    """ Raised when the lexer produced an invalid token (bad string or empty symbol)"""


class TulipParseError(TulipSyntaxError):
    """ Raised on an unexpected ')', an unterminated list or a malformed number"""


class TulipEvalError(TulipError):
    """ Base class for errors raised while evaluating a value"""


class TulipUnboundSymbol(TulipEvalError):
    """ Raised when a symbol is used before it is bound"""


class TulipNotCallable(TulipEvalError):
    """ Raised when the head of a call form is not a lambda or builtin"""


class TulipArityError(TulipEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class TulipTooFewArguments(TulipArityError):
    pass


class TulipTooManyArguments(TulipArityError):
    pass


class TulipTypeError(TulipEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class TulipZeroDivisionError(TulipEvalError):
    """ Raised when dividing by a numerically zero value"""


class TulipOverflowError(TulipEvalError):
    """ Raised when an integer result falls outside the signed 64-bit range"""


class TulipInvalidLambda(TulipEvalError):
    """ Raised when a lambda's parameter list is malformed"""


def check_arity(name: str, args: list, expected: int) -> None:
    """Raise the matching arity error unless exactly `expected` args were given."""
    if len(args) < expected:
        raise TulipTooFewArguments(
            f"{name} expected {expected} argument(s), got {len(args)}"
        )
    if len(args) > expected:
        raise TulipTooManyArguments(
            f"{name} expected {expected} argument(s), got {len(args)}"
        )
