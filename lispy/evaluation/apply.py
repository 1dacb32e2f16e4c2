"""Application engine for Lispy.

This module centralizes the call protocol:
- Builtins are invoked directly with the caller's environment.
- Closures bind formals to arguments one at a time in their own environment,
  supporting partial application and `&` variadic capture.
- Once every formal is bound, the closure environment's parent is pointed at
  the caller's environment and the body is evaluated there.

Failures raised while binding or inside a builtin are turned into error
values here, so a call always returns a value.
"""

from __future__ import annotations

import logging

from lispy.errors import ErrorKind, LispyEvalError
from lispy.types.environment import Environment
from lispy.types.error_value import LispError
from lispy.types.expr import Expr
from lispy.types.function import Builtin, Closure
from lispy.types.symbol import Symbol
from lispy.evaluation import evaluator

logger = logging.getLogger(__name__)

VARIADIC_MARKER = Symbol("&")


def bind_arguments(fn: Closure, args: Expr) -> None:
    """Consume `fn.formals` and `args` in lockstep, binding into `fn.env`.

    Stops early when the arguments run out; whatever formals are left stay on
    `fn.formals`. Raises LispyEvalError for surplus arguments or a malformed
    `&` marker.
    """
    given = len(args)
    total = len(fn.formals)

    while args.cells:
        if not fn.formals.cells:
            raise LispyEvalError(ErrorKind.TOO_MANY_ARGUMENTS, given, total)

        formal = fn.formals.pop(0)
        if formal == VARIADIC_MARKER:
            if len(fn.formals) != 1:
                raise LispyEvalError(ErrorKind.MALFORMED_VARIADIC)
            rest = fn.formals.pop(0)
            fn.env.put(rest, Expr.qexpr(args.cells))
            args.cells = []
            break

        fn.env.put(formal, args.pop(0))

    # Nothing was supplied for the variadic part: bind it to {}
    if fn.formals.cells and fn.formals[0] == VARIADIC_MARKER:
        if len(fn.formals) != 2:
            raise LispyEvalError(ErrorKind.MALFORMED_VARIADIC)
        fn.formals.pop(0)
        rest = fn.formals.pop(0)
        fn.env.put(rest, Expr.qexpr())


def apply_closure(caller_env: Environment, fn: Closure, args: Expr):
    """Apply a closure value that the caller owns.

    Returns a copy of the partially applied closure while formals remain;
    otherwise evaluates the body with the caller's environment as parent.
    """
    bind_arguments(fn, args)

    if fn.formals.cells:
        logger.debug("partial application, awaiting %s", fn.formals)
        return fn.copy()

    logger.debug("applying %s", fn)
    fn.env.parent = caller_env
    return evaluator.evaluate(fn.env, fn.body.copy())


def call(caller_env: Environment, f: Builtin | Closure, args: Expr):
    """Apply `f` to the already-evaluated `args` from `caller_env`."""
    try:
        if isinstance(f, Builtin):
            return f.fn(caller_env, args)
        return apply_closure(caller_env, f, args)
    except LispyEvalError as exc:
        return LispError.of(exc.kind, *exc.fields)
