import pytest
from hypothesis import given, strategies as st

from lispy.errors import LispySyntaxError
from lispy.printer import render
from lispy.reader.grammar import ParseNode, parse
from lispy.reader.reader import read, read_number, read_source
from lispy.types import INT64_MAX, INT64_MIN, Expr, ExprKind, LispError, Number, Symbol


def _leaves(node: ParseNode):
    if not node.children:
        yield node
    for child in node.children:
        yield from _leaves(child)


def test_root_is_framed_by_regex_placeholders():
    tree = parse("+ 1 2")
    assert tree.tag == ">"
    assert tree.children[0].tag == "regex"
    assert tree.children[-1].tag == "regex"
    assert [c.tag for c in tree.children[1:-1]] == [
        "expr|symbol|regex",
        "expr|number|regex",
        "expr|number|regex",
    ]


def test_brackets_are_char_leaves():
    tree = parse("(a {b})")
    sexpr = tree.children[1]
    assert sexpr.tag == "expr|sexpr"
    assert [c.text for c in sexpr.children if c.tag == "char"] == ["(", ")"]
    qexpr = sexpr.children[2]
    assert qexpr.tag == "expr|qexpr"
    assert qexpr.children[0] == ParseNode("char", "{")
    assert qexpr.children[-1] == ParseNode("char", "}")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("-5", [("expr|number|regex", "-5")]),
        ("-", [("expr|symbol|regex", "-")]),
        ("\\", [("expr|symbol|regex", "\\")]),
        ("&& || ! == != >= <=", [("expr|symbol|regex", s) for s in "&& || ! == != >= <=".split()]),
        ("% ^", [("expr|symbol|regex", "%"), ("expr|symbol|regex", "^")]),
        ("foo_bar2", [("expr|symbol|regex", "foo_bar2")]),
    ],
)
def test_leaf_tags(source, expected):
    tree = parse(source)
    assert [(c.tag, c.text) for c in tree.children[1:-1]] == expected


@pytest.mark.parametrize("source", ["(+ 1 2", "{1 2", ")", "(1 2))", "\"str\""])
def test_unparseable_source_raises(source):
    with pytest.raises(LispySyntaxError):
        parse(source)


def test_read_builds_values():
    v = read_source("(+ 1 {x -2})")
    assert v == Expr.sexpr([
        Expr.sexpr([Symbol("+"), Number(1), Expr.qexpr([Symbol("x"), Number(-2)])])
    ])


def test_read_empty_input_is_empty_sexpr():
    assert read_source("") == Expr.sexpr()
    assert read_source("   ") == Expr.sexpr()


def test_read_skips_punctuation_and_regex_leaves_from_any_engine():
    tree = ParseNode(">", "", (
        ParseNode("regex"),
        ParseNode("expr|qexpr", "", (
            ParseNode("char", "{"),
            ParseNode("expr|number|regex", "7"),
            ParseNode("regex", "  "),
            ParseNode("char", "}"),
        )),
        ParseNode("regex"),
    ))
    assert read(tree) == Expr.sexpr([Expr.qexpr([Number(7)])])


def test_read_rejects_unknown_node():
    with pytest.raises(LispySyntaxError):
        read(ParseNode("mystery", "", ()))


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", Number(0)),
        ("42", Number(42)),
        ("-17", Number(-17)),
        (str(INT64_MAX), Number(INT64_MAX)),
        (str(INT64_MIN), Number(INT64_MIN)),
    ],
)
def test_read_number(text, expected):
    assert read_number(text) == expected


@pytest.mark.parametrize("text", [str(INT64_MAX + 1), str(INT64_MIN - 1), "12x", ""])
def test_read_number_invalid(text):
    result = read_number(text)
    assert isinstance(result, LispError)
    assert render(result) == "Error: invalid number"


def test_oversized_literal_reads_as_error_value():
    v = read_source("99999999999999999999")
    assert render(v) == "(Error: invalid number)"


# -------------------------------
# Round trip: read(render(v)) == v
# -------------------------------
numbers = st.integers(min_value=INT64_MIN, max_value=INT64_MAX).map(Number)
symbols = st.from_regex(r"[a-zA-Z_+*\\=<>!&|%^][a-zA-Z0-9_+*\\=<>!&|%^]*", fullmatch=True).map(Symbol)
values = st.recursive(
    numbers | symbols,
    lambda children: st.builds(
        Expr,
        st.sampled_from([ExprKind.SEXPR, ExprKind.QEXPR]),
        st.lists(children, max_size=4),
    ),
    max_leaves=20,
)


@given(values)
def test_render_then_read_round_trips(value):
    root = read_source(render(value))
    assert len(root) == 1
    assert root[0] == value
