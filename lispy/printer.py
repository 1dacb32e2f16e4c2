"""Rendering of Lispy values to text.

Each value class renders itself through `__str__`:

    Number   -> decimal              Bool     -> t / false
    Error    -> Error: <message>     Symbol   -> verbatim
    Sexpr    -> (a b c)              Qexpr    -> {a b c}
    Closure  -> (\\ {formals} (body)) Builtin  -> <function>
"""

from __future__ import annotations


def render(value) -> str:
    """Return the printed form of `value`."""
    return str(value)


def is_equal(a, b) -> bool:
    """Deep structural equality, as used by `==` and `!=`."""
    return a == b
