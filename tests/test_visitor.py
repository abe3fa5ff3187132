from lishp.types.nil import Nil
from lishp.types.pair import from_iterable
from lishp.types.symbol import Symbol
from lishp.visitor import Visitor


class CountingVisitor(Visitor):
    def __init__(self):
        self.seen = []

    def visit_boolean(self, b):
        self.seen.append(("boolean", b))

    def visit_integer(self, i):
        self.seen.append(("integer", i))

    def visit_float(self, f):
        self.seen.append(("float", f))

    def visit_string(self, s):
        self.seen.append(("string", s))

    def visit_symbol(self, s):
        self.seen.append(("symbol", s))


def test_visit_all_atoms():
    for atom in [False, 5, 3.14, "foo", Symbol("foo")]:
        visitor = CountingVisitor()
        visitor.visit(atom)
        assert len(visitor.seen) == 1


def test_booleans_are_not_integers():
    visitor = CountingVisitor()
    visitor.visit(True)
    assert visitor.seen == [("boolean", True)]


def test_visit_a_list():
    value = from_iterable([False, 5, 3.14, "foo", Symbol("foo"), Nil])
    visitor = CountingVisitor()
    visitor.visit(value)
    # Nil is a no-op by default
    assert [kind for kind, _ in visitor.seen] == ["boolean", "integer", "float", "string", "symbol"]


def test_visit_nested_and_dotted():
    value = from_iterable([1, from_iterable([2, 3])], tail=4)
    visitor = CountingVisitor()
    visitor.visit(value)
    assert visitor.seen == [("integer", 1), ("integer", 2), ("integer", 3), ("integer", 4)]


def test_visit_callables(interp):
    class Procedures(Visitor):
        def __init__(self):
            self.names = []

        def visit_primitive(self, p):
            self.names.append(p.name)

        def visit_closure(self, c):
            self.names.append("closure")

    fn = interp.eval([Symbol("lambda"), [], 1])
    visitor = Procedures()
    visitor.visit(from_iterable([interp.eval(Symbol("+")), fn]))
    assert visitor.names == ["+", "closure"]
