"""Lexical analysis for skilisp: turns source text into a flat ConcreteSyntaxTree.

Only three characters are meaningful to the lexer: '(', ')' and ' '. Everything else (letters, digits, '_', but
also tabs and newlines) is an atom character. The scan keeps a single bit of state, whether or not it is inside an
atom, plus the atom read so far.
"""

from skilisp.lang.error import UnexpectedOpenParenInAtom
from skilisp.syntax.tokens import ConcreteSyntaxTree, Name, Symbol


SYMBOLS = {symbol.literal: symbol for symbol in Symbol}


def tokenize(source):
    """Returns the ConcreteSyntaxTree of source. Raises UnexpectedOpenParenInAtom if an atom runs straight into a '('.

    An atom at the very end of source (not followed by ')' or ' ') is still emitted as the last Name.
    """
    expr = []
    in_atom = False  # whether or not the scan is inside an atom
    atom = []

    for char in source:
        if in_atom:
            if char == Symbol.LEFT_PAREN.literal:
                raise UnexpectedOpenParenInAtom(source)
            elif char in SYMBOLS:
                expr.append(Name("".join(atom)))
                expr.append(SYMBOLS[char])

                in_atom = False
                atom.clear()
            else:
                atom.append(char)

        elif char in SYMBOLS:
            expr.append(SYMBOLS[char])
        else:
            in_atom = True
            atom.append(char)

    if in_atom:
        expr.append(Name("".join(atom)))

    return ConcreteSyntaxTree(expr)
