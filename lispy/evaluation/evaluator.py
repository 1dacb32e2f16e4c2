"""Core evaluator for the Lispy interpreter.

Reduces values to normal form against an Environment. Symbols are resolved,
S-expressions are reduced element by element and applied; every other value
is already in normal form. User-level failures come back as error values,
never as exceptions.
"""

from __future__ import annotations

from lispy.errors import ErrorKind, LispyUnboundSymbol
from lispy.evaluation.apply import call
from lispy.types.atoms import Bool, Number
from lispy.types.environment import Environment
from lispy.types.error_value import LispError
from lispy.types.expr import Expr, ExprKind
from lispy.types.function import Builtin, Closure
from lispy.types.symbol import Symbol


def evaluate(env: Environment, value):
    """Evaluate `value` in `env` and return its normal form."""
    match value:
        case Symbol():
            try:
                return env.get(value)
            except LispyUnboundSymbol as exc:
                return LispError.of(exc.kind, *exc.fields)
        case Expr(kind=ExprKind.SEXPR):
            return eval_sexpr(env, value)
        case Number() | Bool() | LispError() | Expr() | Builtin() | Closure():
            return value
    raise TypeError(f"Cannot evaluate non-Lispy value {value!r}")


def eval_sexpr(env: Environment, expr: Expr):
    """Reduce an S-expression in place.

    Elements are evaluated left to right, the first error wins, an empty list
    stays as is, a singleton is unwrapped, and anything longer is a call of
    its first element on the rest.
    """
    cells = expr.cells
    for i, cell in enumerate(cells):
        cells[i] = evaluate(env, cell)

    for cell in cells:
        if isinstance(cell, LispError):
            return cell

    if not cells:
        return expr
    if len(cells) == 1:
        return cells[0]

    f = expr.pop(0)
    if not isinstance(f, (Builtin, Closure)):
        return LispError.of(ErrorKind.NOT_A_FUNCTION)

    return call(env, f, expr)
