"""Built-in functions for the Lispy root environment.

This module defines list processing, integer arithmetic, comparison, boolean
logic, conditionals and the definition forms, and registers them (plus the
`t`/`false` constants) into an environment.

Every builtin takes the calling environment and its already-evaluated
argument list, checks arity, then argument types, then argument values, and
raises on the first violation. The call protocol turns those exceptions into
error values.
"""
from __future__ import annotations

from typing import Callable

from lispy.errors import (
    ErrorKind,
    LispyArityError,
    LispyEvalError,
    LispyTypeError,
    LispyValueError,
)
from lispy.evaluation.evaluator import evaluate
from lispy.printer import is_equal
from lispy.types.atoms import Bool, Number, wrap_int64
from lispy.types.environment import Environment
from lispy.types.expr import Expr, ExprKind
from lispy.types.function import Builtin, Closure
from lispy.types.symbol import Symbol

NUMBER = Number.type_name
BOOLEAN = Bool.type_name
SYMBOL = Symbol.type_name
SEXPR = ExprKind.SEXPR.value
QEXPR = ExprKind.QEXPR.value


# -------------------------------
# Argument checks
# -------------------------------
def expect_count(fn: str, args: Expr, count: int) -> None:
    if len(args) != count:
        raise LispyArityError(fn, len(args), count)


def expect_at_least(fn: str, args: Expr, count: int) -> None:
    if len(args) < count:
        raise LispyArityError(fn, len(args), f"at least {count}")


def expect_type(fn: str, args: Expr, position: int, expected: str) -> None:
    """Positions are 0-based here and reported 1-based."""
    got = args[position].type_name
    if got != expected:
        raise LispyTypeError(fn, position + 1, got, expected)


def expect_all(fn: str, args: Expr, expected: str) -> None:
    for i in range(len(args)):
        expect_type(fn, args, i, expected)


def expect_non_empty(fn: str, args: Expr, position: int) -> None:
    if not len(args[position]):
        raise LispyValueError(ErrorKind.EMPTY_LIST, fn)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: Expr) -> Expr:
    """Return the argument list itself as a Q-expression."""
    return args.as_kind(ExprKind.QEXPR)


def head(env: Environment, args: Expr) -> Expr:
    """Keep only the first element of a non-empty Q-expression."""
    expect_count("head", args, 1)
    expect_type("head", args, 0, QEXPR)
    expect_non_empty("head", args, 0)
    v = args.pop(0)
    del v.cells[1:]
    return v


def tail(env: Environment, args: Expr) -> Expr:
    """Drop the first element of a non-empty Q-expression."""
    expect_count("tail", args, 1)
    expect_type("tail", args, 0, QEXPR)
    expect_non_empty("tail", args, 0)
    v = args.pop(0)
    v.pop(0)
    return v


def eval_builtin(env: Environment, args: Expr):
    """Evaluate a Q-expression as if it were an S-expression."""
    expect_count("eval", args, 1)
    expect_type("eval", args, 0, QEXPR)
    return evaluate(env, args.pop(0).as_kind(ExprKind.SEXPR))


def join(env: Environment, args: Expr) -> Expr:
    """Concatenate Q-expressions in argument order."""
    expect_at_least("join", args, 1)
    expect_all("join", args, QEXPR)
    result = args.pop(0)
    for item in args:
        result.cells.extend(item.cells)
    return result


def cons(env: Environment, args: Expr) -> Expr:
    """(cons n {xs}) prepends the number n."""
    expect_count("cons", args, 2)
    expect_type("cons", args, 0, NUMBER)
    expect_type("cons", args, 1, QEXPR)
    n, xs = args.cells
    xs.cells.insert(0, n)
    return xs


def length(env: Environment, args: Expr) -> Number:
    expect_count("len", args, 1)
    expect_type("len", args, 0, QEXPR)
    return Number(len(args[0]))


# -------------------------------
# Arithmetic
# -------------------------------
def _div(a: int, b: int) -> int:
    # truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _mod(a: int, b: int) -> int:
    # sign follows the dividend
    return a - b * _div(a, b)


def _pow(a: int, b: int) -> int:
    if b >= 0:
        return pow(a, b, 1 << 64)
    if a == 0:
        raise LispyValueError(ErrorKind.DIVIDE_BY_ZERO)
    if a == 1:
        return 1
    if a == -1:
        return -1 if b % 2 else 1
    return 0


def _checked(op: Callable[[int, int], int]) -> Callable[[int, int], int]:
    def apply(a: int, b: int) -> int:
        if b == 0:
            raise LispyValueError(ErrorKind.DIVIDE_BY_ZERO)
        return op(a, b)
    return apply


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _checked(_div),
    "%": _checked(_mod),
    "^": _pow,
}


def arithmetic(op: str, args: Expr) -> Number:
    """Left fold of `op` over all-Number arguments; unary `-` negates."""
    expect_at_least(op, args, 1)
    expect_all(op, args, NUMBER)
    fold = OPERATORS[op]
    values = [n.value for n in args]
    if op == "-" and len(values) == 1:
        return Number(wrap_int64(-values[0]))
    result = values[0]
    for x in values[1:]:
        result = wrap_int64(fold(result, x))
    return Number(result)


def add(env: Environment, args: Expr) -> Number:
    return arithmetic("+", args)


def sub(env: Environment, args: Expr) -> Number:
    return arithmetic("-", args)


def mul(env: Environment, args: Expr) -> Number:
    return arithmetic("*", args)


def div(env: Environment, args: Expr) -> Number:
    return arithmetic("/", args)


def mod(env: Environment, args: Expr) -> Number:
    return arithmetic("%", args)


def power(env: Environment, args: Expr) -> Number:
    return arithmetic("^", args)


# -------------------------------
# Comparison
# -------------------------------
ORDERINGS: dict[str, Callable[[int, int], bool]] = {
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
}


def ordering(op: str, args: Expr) -> Bool:
    expect_count(op, args, 2)
    expect_type(op, args, 0, NUMBER)
    expect_type(op, args, 1, NUMBER)
    return Bool(ORDERINGS[op](args[0].value, args[1].value))


def gt(env: Environment, args: Expr) -> Bool:
    return ordering(">", args)


def lt(env: Environment, args: Expr) -> Bool:
    return ordering("<", args)


def gte(env: Environment, args: Expr) -> Bool:
    return ordering(">=", args)


def lte(env: Environment, args: Expr) -> Bool:
    return ordering("<=", args)


def equals(env: Environment, args: Expr) -> Bool:
    """Deep structural equality of exactly two values of any kind."""
    expect_count("==", args, 2)
    return Bool(is_equal(args[0], args[1]))


def not_equals(env: Environment, args: Expr) -> Bool:
    expect_count("!=", args, 2)
    return Bool(not is_equal(args[0], args[1]))


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: Expr) -> Bool:
    expect_count("&&", args, 2)
    expect_all("&&", args, BOOLEAN)
    return Bool(args[0].value and args[1].value)


def logical_or(env: Environment, args: Expr) -> Bool:
    expect_count("||", args, 2)
    expect_all("||", args, BOOLEAN)
    return Bool(args[0].value or args[1].value)


def logical_not(env: Environment, args: Expr) -> Bool:
    expect_count("!", args, 1)
    expect_type("!", args, 0, BOOLEAN)
    return Bool(not args[0].value)


# -------------------------------
# Conditionals
# -------------------------------
def if_builtin(env: Environment, args: Expr):
    """(if cond {then} {else}) evaluates only the selected branch."""
    expect_count("if", args, 3)
    expect_type("if", args, 0, BOOLEAN)
    expect_type("if", args, 1, QEXPR)
    expect_type("if", args, 2, QEXPR)
    branch = args[1] if args[0].value else args[2]
    return evaluate(env, branch.as_kind(ExprKind.SEXPR))


# -------------------------------
# Definitions
# -------------------------------
def _bind(fn: str, args: Expr, bind: Callable[[Symbol, object], None]) -> Expr:
    """Shared shape of `def` and `=`: ({names...} values...)."""
    expect_at_least(fn, args, 1)
    expect_type(fn, args, 0, QEXPR)
    names = args[0]
    for name in names:
        if not isinstance(name, Symbol):
            raise LispyEvalError(ErrorKind.NOT_A_SYMBOL, fn, name.type_name)
    if len(names) != len(args) - 1:
        raise LispyArityError(fn, len(args) - 1, len(names))
    for name, value in zip(names, args.cells[1:]):
        bind(name, value)
    return Expr.sexpr()


def define(env: Environment, args: Expr) -> Expr:
    """(def {names...} values...) binds in the root environment."""
    return _bind("def", args, env.define)


def put(env: Environment, args: Expr) -> Expr:
    """(= {names...} values...) binds in the current environment."""
    return _bind("=", args, env.put)


def lambda_builtin(env: Environment, args: Expr) -> Closure:
    """(\\ {formals} {body}) builds a closure with a fresh environment."""
    expect_count("\\", args, 2)
    expect_type("\\", args, 0, QEXPR)
    expect_type("\\", args, 1, QEXPR)
    formals, body = args.cells
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise LispyEvalError(ErrorKind.NOT_A_SYMBOL, "\\", formal.type_name)
    return Closure(formals, body.as_kind(ExprKind.SEXPR))


BUILTINS: dict[str, Callable[[Environment, Expr], object]] = {
    # list functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "len": length,
    # mathematical functions
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "^": power,
    # definitions
    "def": define,
    "=": put,
    "\\": lambda_builtin,
    # comparison and conditionals
    "if": if_builtin,
    "==": equals,
    "!=": not_equals,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    # boolean logic
    "||": logical_or,
    "&&": logical_and,
    "!": logical_not,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.put(Symbol("t"), Bool(True))
    env.put(Symbol("false"), Bool(False))
