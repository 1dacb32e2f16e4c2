"""Function values: primitive builtins and user-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from lispy.types.environment import Environment
from lispy.types.expr import Expr


class Builtin:
    """Reference to a primitive operation with the (env, args) signature."""

    __slots__ = ("name", "fn")

    type_name = "Function"

    def __init__(self, name: str, fn: Callable):
        self.name = name
        self.fn = fn

    def copy(self) -> Builtin:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Builtin, Closure)):
            return NotImplemented
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __str__(self) -> str:
        return "<function>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"


class Closure:
    """A user-defined function with formals, body, and its own environment.

    `formals` is a Q-expression of Symbols, possibly containing the variadic
    marker `&`; `body` is the S-expression evaluated once every formal is
    bound. The environment belongs to this closure alone and accumulates the
    bindings made by partial application.
    """

    __slots__ = ("formals", "body", "env")

    type_name = "Function"

    def __init__(self, formals: Expr, body: Expr, env: Environment | None = None):
        self.formals: Expr = formals
        self.body: Expr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Closure:
        return Closure(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Builtin, Closure)):
            return NotImplemented
        return (
            isinstance(other, Closure)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
