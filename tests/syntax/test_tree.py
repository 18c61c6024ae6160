import dataclasses
import unittest

from skilisp.syntax.parser import parse
from skilisp.syntax.tree import Application, Atom


class AtomTestCase(unittest.TestCase):

    def test_atom(self):
        atom = Atom("value_second")
        self.assertEqual("value_second", atom.expr)
        self.assertEqual("value_second", str(atom))
        self.assertEqual(0, atom.depth)
        self.assertEqual([atom], atom.leaves())
        self.assertEqual((), atom.nodes)

    def test_immutable(self):
        self.assertRaises(dataclasses.FrozenInstanceError, setattr, Atom("x"), "text", "y")


class ApplicationTestCase(unittest.TestCase):

    def test_init(self):
        self.assertRaises(ValueError, Application, ())
        self.assertRaises(ValueError, Application, (node for node in []))
        self.assertEqual(Application((Atom("k"),)), Application(node for node in [Atom("k")]))

        tree = Application([Atom("k"), Atom("x")])
        self.assertIsInstance(tree.nodes, tuple)
        self.assertEqual(Atom("k"), tree.head)
        self.assertEqual((Atom("x"),), tree.args)

    def test_expr(self):
        cases = {
            "(i value)": "(i value)",
            "( i  value )": "(i value)",
            "( s ( k s )  k )": "(s (k s) k)",
            "(((x)))": "(((x)))",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case).expr, case)

    def test_equality(self):
        self.assertEqual(parse("(s k k)"), parse("(s k k)"))
        self.assertNotEqual(parse("(s k k)"), parse("(s k)"))
        self.assertNotEqual(parse("(s (k k))"), parse("(s k k)"))
        self.assertNotEqual(Atom("x"), Application((Atom("x"),)))
        self.assertEqual(hash(parse("(s k k)")), hash(parse("( s k k )")))

    def test_immutable(self):
        tree = parse("(i x)")
        self.assertRaises(dataclasses.FrozenInstanceError, setattr, tree, "nodes", ())

    def test_display(self):
        expected = (
            "Application(expr='(k x (i y))', nodes=[\n"
            "    Atom(expr='k'),\n"
            "    Atom(expr='x'),\n"
            "    Application(expr='(i y)', nodes=[\n"
            "        Atom(expr='i'),\n"
            "        Atom(expr='y')\n"
            "    ])\n"
            "])"
        )
        self.assertEqual(expected, parse("(k x (i y))").display())
        self.assertEqual("Atom(expr='x')", parse("x").display())

    def test_repr(self):
        self.assertEqual("Application('(i x)')", repr(parse("( i x )")))
        self.assertEqual("Atom('x')", repr(Atom("x")))

    def test_deep(self):
        tree = Atom("x")
        for __ in range(2000):
            tree = Application((tree,))

        other = Atom("x")
        for __ in range(2000):
            other = Application((other,))

        self.assertEqual(2000, tree.depth)
        self.assertEqual([Atom("x")], tree.leaves())
        self.assertEqual("(" * 2000 + "x" + ")" * 2000, tree.expr)
        self.assertEqual(other, tree)
        self.assertEqual(hash(other), hash(tree))
        self.assertNotEqual(Application((other, Atom("y"))), Application((tree, Atom("z"))))
        self.assertEqual(10001, len(tree.display().splitlines()))


if __name__ == '__main__':
    unittest.main()
