import unittest

from skilisp.lang.error import LexError, UnexpectedOpenParenInAtom
from skilisp.syntax.lexical import tokenize
from skilisp.syntax.tokens import ConcreteSyntaxTree, Name, Symbol

L, R, S = Symbol.LEFT_PAREN, Symbol.RIGHT_PAREN, Symbol.SPACE


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        cases = {
            "(i value)": [L, Name("i"), S, Name("value"), R],
            "(k value value_second)": [L, Name("k"), S, Name("value"), S, Name("value_second"), R],
            "(s value value_second value_third)": [
                L, Name("s"), S, Name("value"), S, Name("value_second"), S, Name("value_third"), R
            ],
        }
        for case, expected in cases.items():
            self.assertEqual(ConcreteSyntaxTree(expected), tokenize(case), case)

    def test_tokenize_recurse(self):
        cases = {
            "(i (i value))": [L, Name("i"), S, L, Name("i"), S, Name("value"), R, R],
            "(k value (k value value_second))": [
                L, Name("k"), S, Name("value"), S, L, Name("k"), S, Name("value"), S, Name("value_second"), R, R
            ],
            "((i i) x)": [L, L, Name("i"), S, Name("i"), R, S, Name("x"), R],
            "(((x)))": [L, L, L, Name("x"), R, R, R],
        }
        for case, expected in cases.items():
            self.assertEqual(ConcreteSyntaxTree(expected), tokenize(case), case)

    def test_tokenize_with_more_spaces(self):
        expected = [S, L, S, Name("i"), S, L, S, Name("i"), S, Name("value"), S, R, S, R, S, S]
        self.assertEqual(ConcreteSyntaxTree(expected), tokenize(" ( i ( i value ) )  "))

    def test_tokenize_number(self):
        self.assertEqual(["i", "i", "2"], tokenize("( i ( i 2 ) )").names())
        self.assertEqual(["function2", "23", "34"], tokenize("(function2 23 34)").names())
        self.assertEqual(["function2", "23", "34"], tokenize("( function2 23 34 )").names())

    def test_trailing_atom(self):
        cases = {
            "x": [Name("x")],
            "value_second": [Name("value_second")],
            "(i x) y": [L, Name("i"), S, Name("x"), R, S, Name("y")],
            "i value)": [Name("i"), S, Name("value"), R],
        }
        for case, expected in cases.items():
            self.assertEqual(ConcreteSyntaxTree(expected), tokenize(case), case)

    def test_other_characters_are_atoms(self):
        self.assertEqual(["a\tb", "c\nd", "λx"], tokenize("(a\tb c\nd λx)").names())

    def test_open_paren_in_atom(self):
        should_raise = ["(i(x))", "x(", "(k value(k))", "ab(c)"]
        for case in should_raise:
            self.assertRaises(UnexpectedOpenParenInAtom, tokenize, case)
            self.assertRaises(LexError, tokenize, case)

    def test_empty(self):
        self.assertEqual(ConcreteSyntaxTree(), tokenize(""))
        self.assertEqual(0, len(tokenize("")))

    def test_round_trip(self):
        cases = [
            "", " ", "x", "(i value)", "( i  ( i value ) )", "(s (k s) k)", ")(", "((((", "a b c)", "(  )",
            "(function2 23 34)", "(k value value_second)  ",
        ]
        for case in cases:
            self.assertEqual(case, str(tokenize(case)), case)


class ConcreteSyntaxTreeTestCase(unittest.TestCase):

    def test_sequence(self):
        tokens = tokenize("(k x)")
        self.assertEqual(5, len(tokens))
        self.assertIs(L, tokens[0])
        self.assertEqual(Name("x"), tokens[3])
        self.assertEqual([L, Name("k"), S, Name("x"), R], list(tokens))

    def test_literal(self):
        self.assertEqual("(", L.literal)
        self.assertEqual(")", R.literal)
        self.assertEqual(" ", S.literal)
        self.assertEqual("value", Name("value").literal)


if __name__ == '__main__':
    unittest.main()
