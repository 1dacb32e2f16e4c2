"""
  Lispy grammar

Parses source text with lark and hands back a generic parse tree of
`ParseNode(tag, text, children)`, the shape the reader consumes:

    - root            -> tag ">" framed by two "regex" placeholder leaves
    - (...) / {...}   -> tags "expr|sexpr" / "expr|qexpr"
    - numbers         -> leaf tag "expr|number|regex"
    - symbols         -> leaf tag "expr|symbol|regex"
    - ( ) { }         -> leaf tag "char", text is the bracket itself

Any other engine producing the same tags can feed the reader directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from lispy.errors import LispySyntaxError


GRAMMAR = r"""
    lispy: expr*

    ?expr: number
         | symbol
         | sexpr
         | qexpr

    number: NUMBER
    symbol: SYMBOL
    sexpr: "(" expr* ")"
    qexpr: "{" expr* "}"

    NUMBER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z0-9_+\-*\/\\=<>!&|%^]+/

    %import common.WS
    %ignore WS
"""


@dataclass(frozen=True)
class ParseNode:
    tag: str
    text: str = ""
    children: tuple[ParseNode, ...] = ()


_START = ParseNode("regex")
_END = ParseNode("regex")


class _ParseTreeBuilder(Transformer):
    """Turn lark's Tree/Token output into ParseNodes."""

    @staticmethod
    def _child(child) -> ParseNode:
        if isinstance(child, Token):
            return ParseNode("char", str(child))
        return child

    def number(self, children):
        return ParseNode("expr|number|regex", str(children[0]))

    def symbol(self, children):
        return ParseNode("expr|symbol|regex", str(children[0]))

    def sexpr(self, children):
        return ParseNode("expr|sexpr", "", tuple(self._child(c) for c in children))

    def qexpr(self, children):
        return ParseNode("expr|qexpr", "", tuple(self._child(c) for c in children))

    def lispy(self, children):
        return ParseNode(">", "", (_START, *children, _END))


@lru_cache(maxsize=None)
def _parser() -> Lark:
    # Brackets are anonymous tokens; keep_all_tokens leaves them in the tree
    return Lark(GRAMMAR, start="lispy", parser="lalr", keep_all_tokens=True)


def parse(source: str) -> ParseNode:
    """Parse `source` into a ParseNode tree rooted at tag ">".

    Raises LispySyntaxError if the text is not valid Lispy.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as exc:
        raise LispySyntaxError(f"Cannot parse input: {exc}") from exc
    return _ParseTreeBuilder().transform(tree)
