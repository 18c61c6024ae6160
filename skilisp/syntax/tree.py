"""Abstract syntax tree for skilisp expressions.

```
<expr> ::= <atom>                   ; "atom": any name, kept verbatim (digits are names too)
         | "(" <expr> <expr>* ")"   ; "application": one or more expressions, separated by spaces
```

Trees are immutable once built, and nodes never share children, so an evaluator can walk `nodes` recursively
without worrying about aliasing. Nothing in this module recurses itself: depth and hash are computed once, bottom-up,
when an Application is built, and every other traversal keeps an explicit stack, so arbitrarily deep trees are fine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple


class SyntaxNode(ABC):
    """Superclass of every AST node."""

    @property
    @abstractmethod
    def depth(self):
        """Maximum parenthesis depth within this node (0 for an atom)."""

    def walk(self):
        """Yields (node, level) for this node and every node below it, in pre-order."""
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            yield node, level
            stack.extend((child, level + 1) for child in reversed(node.nodes))

    def leaves(self):
        """Returns the Atoms of this node, left to right."""
        return [node for node, __ in self.walk() if not node.nodes]

    @property
    def expr(self):
        """Canonical source text of this node: single spaces, no redundant whitespace."""
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif not item.nodes:
                parts.append(item.text)
            else:
                stack.append(")")
                for idx in range(len(item.nodes) - 1, -1, -1):
                    stack.append(item.nodes[idx])
                    if idx:
                        stack.append(" ")
                stack.append("(")
        return "".join(parts)

    def display(self):
        """Displays the tree in a readable format.

        Format:
        Application(expr='<expr>', nodes=[
            Atom(expr='<expr>'),
            Application(expr='<expr>', nodes=[
                ...
            ])
        ])
        """
        lines = []
        stack = [(self, 0, "")]  # (node, indents, suffix), or (None, indents, suffix) to close a node
        while stack:
            node, indents, suffix = stack.pop()
            pad = "    " * indents

            if node is None:
                lines.append(f"{pad}]){suffix}")
            elif not node.nodes:
                lines.append(f"{pad}{type(node).__name__}(expr='{node.expr}'){suffix}")
            else:
                lines.append(f"{pad}{type(node).__name__}(expr='{node.expr}', nodes=[")
                stack.append((None, indents, suffix))
                last = len(node.nodes) - 1
                for idx in range(last, -1, -1):
                    stack.append((node.nodes[idx], indents + 1, "" if idx == last else ","))
        return "\n".join(lines)

    def __repr__(self):
        return f"{type(self).__name__}('{self.expr}')"

    def __str__(self):
        return self.expr


@dataclass(frozen=True, repr=False)
class Atom(SyntaxNode):
    """A name. Whether it is a combinator, a number or a variable is for the evaluator to decide."""
    text: str

    nodes = ()

    @property
    def depth(self):
        return 0


@dataclass(frozen=True, eq=False, repr=False)
class Application(SyntaxNode):
    """A parenthesized, non-empty list of expressions: the head applied to the rest."""
    nodes: Tuple[SyntaxNode, ...]

    def __post_init__(self):
        nodes = tuple(self.nodes)
        if not nodes:
            raise ValueError("an application needs at least one expression")

        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "_depth", 1 + max(node.depth for node in nodes))
        object.__setattr__(self, "_hash", hash((Application, tuple(hash(node) for node in nodes))))

    @property
    def head(self):
        return self.nodes[0]

    @property
    def args(self):
        return self.nodes[1:]

    @property
    def depth(self):
        return self._depth

    def __eq__(self, other):
        if not isinstance(other, Application):
            return NotImplemented

        pairs = [(self, other)]
        while pairs:
            left, right = pairs.pop()
            if left is right:
                continue
            if type(left) is not type(right):
                return False
            if not left.nodes:
                if left != right:
                    return False
                continue
            if len(left.nodes) != len(right.nodes) or left._hash != right._hash or left._depth != right._depth:
                return False
            pairs.extend(zip(left.nodes, right.nodes))
        return True

    def __hash__(self):
        return self._hash
