import pytest

from lishp.types.closure import Closure
from lishp.types.environment import Environment
from lishp.types.nil import Nil, NilType
from lishp.types.pair import Pair, from_iterable, is_proper_list, last_tail, to_list
from lishp.types.primitive import Primitive
from lishp.types.symbol import Symbol
from lishp.types.value import is_truthy, is_value, kind_of, values_eq, values_equal
from lishp.ast import Literal


# -----------------------------------------------------
# Structural equality
# -----------------------------------------------------

@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Nil, Nil, True),
        (1, 1, True),
        (1, 1.0, True),
        (2.5, 2.5, True),
        (1, 2, False),
        (True, True, True),
        (True, 1, False),
        (False, 0, False),
        (False, Nil, False),
        (Symbol("a"), Symbol("a"), True),
        (Symbol("a"), "a", False),
        ("a", "a", True),
        ("a", "b", False),
        (Nil, 0, False),
        (from_iterable([1, 2, 3]), from_iterable([1, 2, 3]), True),
        (from_iterable([1, 2, 3]), from_iterable([1, 2]), False),
        (Pair(1, 2), Pair(1, 2), True),
        (Pair(1, 2), Pair(1, 3), False),
        (from_iterable([1, from_iterable([2, 3])]), from_iterable([1.0, from_iterable([2, 3.0])]), True),
    ],
)
def test_values_equal(a, b, expected):
    assert values_equal(a, b) is expected
    assert values_equal(b, a) is expected


def test_callables_compare_by_identity():
    env = Environment()
    body = Literal(1)
    f = Closure((), body, env)
    g = Closure((), body, env)
    assert values_equal(f, f)
    assert not values_equal(f, g)

    p = Primitive("id", lambda args: args[0], 1, 1)
    q = Primitive("id", lambda args: args[0], 1, 1)
    assert values_equal(p, p)
    assert not values_equal(p, q)


def test_pair_eq_operator_is_structural():
    assert from_iterable([1, 2]) == from_iterable([1, 2])
    assert from_iterable([1, 2]) != from_iterable([2, 1])
    assert Pair(True, Nil) != Pair(1, Nil)


def test_eq_is_identity_for_pairs():
    p = from_iterable([1])
    assert values_eq(p, p)
    assert not values_eq(p, from_iterable([1]))
    assert values_eq(3, 3)
    assert values_eq(Symbol("x"), Symbol("x"))


# -----------------------------------------------------
# Classification and truthiness
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,kind",
    [
        (Nil, "nil"),
        (True, "boolean"),
        (3, "integer"),
        (3.0, "float"),
        (Symbol("s"), "symbol"),
        ("s", "string"),
        (Pair(1, 2), "pair"),
        (Primitive("p", lambda args: Nil), "primitive"),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) == kind


@pytest.mark.parametrize("value", [0, 0.0, "", True, Symbol("nil"), Pair(Nil, Nil)])
def test_truthy_values(value):
    assert is_truthy(value)


@pytest.mark.parametrize("value", [Nil, False])
def test_falsy_values(value):
    assert not is_truthy(value)


@pytest.mark.parametrize("value", [[1], {}, None, object(), 2 ** 63, -(2 ** 63) - 1])
def test_is_value_rejects_foreign_objects(value):
    assert not is_value(value)


def test_is_value_accepts_int64_bounds():
    assert is_value(2 ** 63 - 1)
    assert is_value(-(2 ** 63))


# -----------------------------------------------------
# Nil and pairs
# -----------------------------------------------------

def test_nil_is_a_singleton():
    assert NilType() is Nil
    assert str(Nil) == "()"
    assert not Nil
    assert list(Nil) == []


def test_proper_and_dotted_lists():
    proper = from_iterable([1, 2, 3])
    dotted = from_iterable([1, 2], tail=3)
    assert is_proper_list(proper)
    assert is_proper_list(Nil)
    assert not is_proper_list(dotted)
    assert last_tail(dotted) == 3
    assert list(dotted) == [1, 2]
    assert to_list(proper) == [1, 2, 3]
    assert to_list(Nil) == []
    with pytest.raises(ValueError):
        to_list(dotted)


def test_circular_list_is_not_proper():
    p = from_iterable([1, 2])
    p.tail.tail = p
    assert not is_proper_list(p)


def _cycle(*items):
    head = from_iterable(items)
    node = head
    while node.tail is not Nil:
        node = node.tail
    node.tail = head
    return head


def test_circular_lists_compare_structurally():
    assert values_equal(_cycle(1, 2), _cycle(1, 2))
    # same infinite unfolding, different period
    assert values_equal(_cycle(1, 2), _cycle(1, 2, 1, 2))
    assert not values_equal(_cycle(1, 2), _cycle(1, 3))
    assert not values_equal(_cycle(1, 2), from_iterable([1, 2]))
    assert _cycle(1) == _cycle(1.0)


def test_circular_head_compares_structurally():
    a = Pair(Nil, Nil)
    a.head = a
    b = Pair(Nil, Nil)
    b.head = b
    assert values_equal(a, b)
    assert not values_equal(a, Pair(Pair(1, Nil), Nil))


def test_deeply_nested_lists_compare_without_recursion():
    a = b = Nil
    for _ in range(5000):
        a, b = Pair(a, Nil), Pair(b, Nil)
    assert values_equal(a, b)


def test_pair_repr_is_cycle_safe():
    assert repr(from_iterable([1, 2])) == "<Pair (1 2)>"
    assert repr(_cycle(1, 2)) == "<Pair (1 2 ...)>"
