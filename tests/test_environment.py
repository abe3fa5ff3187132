import pytest

from lishp.errors import LishpInvalidSymbol, LishpUnboundName
from lishp.types.environment import Environment
from lishp.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


@pytest.fixture
def root():
    env = Environment()
    env.define(x, 1)
    return env


def test_lookup_in_current_frame(root):
    assert root.lookup(x) == 1


def test_lookup_walks_parents(root):
    inner = root.child().child()
    assert inner.lookup(x) == 1
    assert inner.find(x) is root


def test_unbound_name_raises_with_name(root):
    with pytest.raises(LishpUnboundName) as excinfo:
        root.child().lookup(y)
    assert excinfo.value.name == y


def test_child_shadows_without_touching_parent(root):
    inner = root.child()
    inner.define(x, 2)
    assert inner.lookup(x) == 2
    assert root.lookup(x) == 1


def test_define_overwrites_in_same_frame(root):
    root.define(x, 10)
    assert root.lookup(x) == 10
    assert list(root.vars) == [x]


def test_define_into_parent_is_visible_to_existing_children(root):
    inner = root.child()
    assert not inner.is_bound(y)
    root.define(y, "late")
    assert inner.lookup(y) == "late"


def test_define_requires_symbol(root):
    with pytest.raises(LishpInvalidSymbol):
        root.define("x", 1)


def test_update_and_root(root):
    inner = root.child()
    inner.update({y: 2})
    assert inner.lookup(y) == 2
    assert not root.is_bound(y)
    assert inner.root() is root


def test_string_forms():
    env = Environment()
    env.define(x, 1)
    inner = env.child()
    inner.define(y, 2)
    assert str(env) == "{x: 1}"
    assert str(inner) == "{y: 2} -> ..."
    assert repr(inner) == "<Environment chain: {y: 2} -> <root: 1 bindings>>"
