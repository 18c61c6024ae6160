"""Concrete syntax tokens: the flat output of the lexer.

A concrete syntax sequence carries no nesting information, but it is literal: joining the text of every token
gives back the source it was scanned from, character for character.
"""

from dataclasses import dataclass
from enum import Enum


class Symbol(Enum):
    """Structural tokens. The value of each member is its literal source text."""
    SPACE = " "
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    @property
    def literal(self):
        return self.value

    def __repr__(self):
        return f"Symbol.{self.name}"


@dataclass(frozen=True)
class Name:
    """An atom: a maximal run of characters that are not '(', ')' or space, kept verbatim."""
    text: str

    @property
    def literal(self):
        return self.text


class ConcreteSyntaxTree:
    """Ordered sequence of Symbols and Names, in source order."""

    def __init__(self, expr=None):
        self.expr = tuple(expr) if expr is not None else ()

    def names(self):
        """Returns the text of every Name token, in order."""
        return [token.text for token in self.expr if isinstance(token, Name)]

    def __iter__(self):
        return iter(self.expr)

    def __len__(self):
        return len(self.expr)

    def __getitem__(self, idx):
        return self.expr[idx]

    def __eq__(self, other):
        return isinstance(other, ConcreteSyntaxTree) and self.expr == other.expr

    def __repr__(self):
        return f"ConcreteSyntaxTree({self.expr!r})"

    def __str__(self):
        return "".join(token.literal for token in self.expr)
