import pytest

from lispy.errors import ErrorKind, LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types import Bool, Closure, Environment, Expr, Number, Symbol


@pytest.fixture
def chain():
    root = Environment()
    middle = Environment(parent=root)
    leaf = Environment(parent=middle)
    return root, middle, leaf


def test_get_searches_outward(chain):
    root, middle, leaf = chain
    root.put(Symbol("x"), Number(1))
    middle.put(Symbol("y"), Number(2))
    assert leaf.get(Symbol("x")) == Number(1)
    assert leaf.get(Symbol("y")) == Number(2)


def test_inner_binding_shadows_outer(chain):
    root, middle, leaf = chain
    root.put(Symbol("x"), Number(1))
    leaf.put(Symbol("x"), Number(9))
    assert leaf.get(Symbol("x")) == Number(9)
    assert middle.get(Symbol("x")) == Number(1)


def test_get_unbound_raises():
    env = Environment()
    with pytest.raises(LispyUnboundSymbol) as info:
        env.get(Symbol("nope"))
    assert info.value.kind is ErrorKind.UNBOUND_SYMBOL
    assert str(info.value) == "unbound symbol 'nope'!"


def test_put_is_local_and_last_write_wins(chain):
    root, middle, leaf = chain
    leaf.put(Symbol("x"), Number(1))
    leaf.put(Symbol("x"), Number(2))
    assert leaf.get(Symbol("x")) == Number(2)
    assert Symbol("x") not in root
    assert len(leaf) == 1


def test_put_keeps_insertion_order():
    env = Environment()
    for name in "cab":
        env.put(Symbol(name), Number(0))
    env.put(Symbol("c"), Number(1))
    assert [str(k) for k in env.vars] == ["c", "a", "b"]


def test_define_walks_to_root(chain):
    root, middle, leaf = chain
    leaf.define(Symbol("g"), Bool(True))
    assert Symbol("g") in root
    assert Symbol("g") not in leaf
    assert leaf.root() is root


def test_put_rejects_non_symbols():
    with pytest.raises(LispyInvalidSymbol):
        Environment().put("x", Number(1))


def test_put_and_get_copy_lists():
    env = Environment()
    original = Expr.qexpr([Number(1), Number(2)])
    env.put(Symbol("xs"), original)
    original.cells.append(Number(3))
    fetched = env.get(Symbol("xs"))
    assert fetched == Expr.qexpr([Number(1), Number(2)])
    fetched.cells.clear()
    assert len(env.get(Symbol("xs"))) == 2


def test_copy_is_deep_and_keeps_parent(chain):
    root, middle, leaf = chain
    leaf.put(Symbol("xs"), Expr.qexpr([Number(1)]))
    clone = leaf.copy()
    assert clone.parent is middle
    clone.vars[Symbol("xs")].cells.append(Number(2))
    clone.put(Symbol("y"), Number(0))
    assert leaf.get(Symbol("xs")) == Expr.qexpr([Number(1)])
    assert Symbol("y") not in leaf


def test_closure_copy_copies_its_environment():
    fn = Closure(Expr.qexpr([Symbol("y")]), Expr.sexpr([Symbol("y")]))
    fn.env.put(Symbol("x"), Number(1))
    clone = fn.copy()
    clone.env.put(Symbol("x"), Number(2))
    clone.formals.cells.clear()
    assert fn.env.get(Symbol("x")) == Number(1)
    assert len(fn.formals) == 1


def test_str_shows_frame_and_parent_marker(chain):
    root, middle, leaf = chain
    leaf.put(Symbol("x"), Number(1))
    assert str(leaf) == "{x: 1} -> ..."
    assert str(root) == "{}"
