"""Reader: converts a generic parse tree into Lispy values."""

from __future__ import annotations

import logging

from lispy.errors import ErrorKind, LispySyntaxError
from lispy.reader.grammar import ParseNode, parse
from lispy.types.atoms import INT64_MAX, INT64_MIN, Number
from lispy.types.error_value import LispError
from lispy.types.expr import Expr
from lispy.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Placeholders that carry no meaning once the tree has been built
PUNCTUATION = frozenset({"(", ")", "{", "}"})


def read_number(text: str) -> Number | LispError:
    """Parse a base-10 integer literal; out-of-range or malformed text is an error value."""
    try:
        n = int(text, 10)
    except ValueError:
        n = None
    if n is None or not INT64_MIN <= n <= INT64_MAX:
        logger.debug("invalid number literal %r", text)
        return LispError.of(ErrorKind.INVALID_NUMBER)
    return Number(n)


def read(node: ParseNode):
    """Convert a ParseNode tree into a value tree.

    Leaves tagged "number"/"symbol" become Numbers/Symbols; the root (">") and
    "sexpr" nodes become S-expressions, "qexpr" nodes Q-expressions.
    """
    if "number" in node.tag:
        return read_number(node.text)
    if "symbol" in node.tag:
        return Symbol(node.text)

    if node.tag == ">" or "sexpr" in node.tag:
        expr = Expr.sexpr()
    elif "qexpr" in node.tag:
        expr = Expr.qexpr()
    else:
        raise LispySyntaxError(f"Cannot read parse node tagged {node.tag!r}")

    for child in node.children:
        if child.text in PUNCTUATION or child.tag == "regex":
            continue
        expr.cells.append(read(child))
    return expr


def read_source(source: str) -> Expr:
    """Parse and read `source`, returning the root S-expression."""
    return read(parse(source))
