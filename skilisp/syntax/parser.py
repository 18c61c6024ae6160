"""Parser for skilisp: turns a ConcreteSyntaxTree into Atoms and Applications.

Spaces are pure separators and never reach the tree. The parser alternates between two states: expecting an
element (an atom or a '(' opening a nested application), and closing the applications it is currently inside, each
of which ends on the ')' found at its own depth. Open applications are kept on an explicit stack rather than the
Python call stack, so nesting depth is only limited by memory. Parsing is fail-fast: the first malformed token raises
a ParseError and no partial tree is returned.
"""

from skilisp.lang.error import EmptyInput, TrailingTokens, UnbalancedParentheses, UnexpectedCloseParen
from skilisp.syntax.lexical import tokenize
from skilisp.syntax.tokens import Symbol
from skilisp.syntax.tree import Application, Atom


class Parser:
    """Single-use cursor over a ConcreteSyntaxTree."""

    def __init__(self, tokens, source=None):
        """source is only used for error messages (defaults to the text tokens were scanned from)."""
        self.tokens = tokens
        self.source = source if source is not None else str(tokens)
        self.pos = 0

    def _skip_spaces(self):
        while self.pos < len(self.tokens) and self.tokens[self.pos] is Symbol.SPACE:
            self.pos += 1

    def at_end(self):
        """Whether or not only spaces are left."""
        self._skip_spaces()
        return self.pos == len(self.tokens)

    def element(self):
        """Parses the next complete top-level element: an atom, or an application up to its matching ')'."""
        open_lists = []  # children read so far of every unclosed '(', innermost last (len(open_lists) is the depth)

        while True:
            # expecting an element
            if self.at_end():
                if open_lists:
                    raise UnbalancedParentheses(self.source)
                raise EmptyInput()

            token = self.tokens[self.pos]
            self.pos += 1

            if token is Symbol.LEFT_PAREN:
                open_lists.append([])
                continue
            elif token is Symbol.RIGHT_PAREN:
                raise UnexpectedCloseParen(self.source)  # also rejects '()'
            node = Atom(token.text)

            # closing lists: attach node, then close every application whose ')' comes next
            while open_lists:
                open_lists[-1].append(node)
                if self.at_end():
                    raise UnbalancedParentheses(self.source)
                if self.tokens[self.pos] is not Symbol.RIGHT_PAREN:
                    break

                self.pos += 1
                node = Application(tuple(open_lists.pop()))
            else:
                return node

    def elements(self):
        """Parses every remaining top-level element."""
        forms = []
        while not self.at_end():
            forms.append(self.element())
        return forms


def build_tree(tokens, source=None):
    """Returns the single expression in tokens. Raises TrailingTokens if more than one top-level expression follows,
    unless the surplus is itself malformed, in which case that error is raised instead.
    """
    parser = Parser(tokens, source)
    tree = parser.element()

    if not parser.at_end():
        parser.elements()
        raise TrailingTokens(parser.source)
    return tree


def build_forest(tokens, source=None):
    """Returns every top-level expression in tokens, in order (empty list if there are none)."""
    return Parser(tokens, source).elements()


def parse(source):
    """Tokenizes and parses source, which must hold exactly one expression."""
    return build_tree(tokenize(source), source)


def parse_many(source):
    """Tokenizes and parses source, which may hold any number of top-level expressions."""
    return build_forest(tokenize(source), source)
