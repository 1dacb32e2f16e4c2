from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Error taxonomy for Lispy error values.

    Each member holds the template its message is rendered from. Fields are
    interpolated only when the message is needed.
    """

    INVALID_NUMBER = "invalid number"
    UNBOUND_SYMBOL = "unbound symbol '{0}'!"
    ARITY_MISMATCH = "Function '{0}' passed incorrect number of arguments! Got {1}, expected {2}."
    TYPE_MISMATCH = "Function '{0}' passed incorrect type for argument {1}! Got {2}, expected {3}."
    EMPTY_LIST = "Function '{0}' passed {{}}!"
    DIVIDE_BY_ZERO = "Division by zero!"
    MALFORMED_VARIADIC = "malformed variadic formal"
    NOT_A_FUNCTION = "does not start with function"
    NOT_A_SYMBOL = "Function '{0}' cannot define non-symbol! Got {1}, expected Symbol."
    TOO_MANY_ARGUMENTS = "too many arguments: got {0}, expected {1}"

    def format(self, *fields: object) -> str:
        return self.value.format(*fields)


class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when source text or a parse tree cannot be read"""

class LispyInvalidSymbol(LispyError):
    """ Raised when a non-symbol is used as an environment key"""

class LispyPreludeError(LispyError):
    """ Raised when a prelude form evaluates to an error value"""


class LispyEvalError(LispyError):
    """User-level failure raised inside builtins and argument binding.

    Never escapes evaluation: the evaluator and the call protocol turn it into
    an error value carrying the same kind and fields.
    """

    def __init__(self, kind: ErrorKind, *fields: object):
        super().__init__(kind.format(*fields))
        self.kind = kind
        self.fields = fields

class LispyUnboundSymbol(LispyEvalError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name: str):
        super().__init__(ErrorKind.UNBOUND_SYMBOL, name)
        self.name = name

class LispyArityError(LispyEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, fn: str, got: int, expected: int | str):
        super().__init__(ErrorKind.ARITY_MISMATCH, fn, got, expected)

class LispyTypeError(LispyEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, fn: str, position: int, got: str, expected: str):
        super().__init__(ErrorKind.TYPE_MISMATCH, fn, position, got, expected)

class LispyValueError(LispyEvalError):
    """ Raised when an argument has the right type but an unusable value"""
