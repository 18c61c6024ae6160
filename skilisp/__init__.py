"""Front end for skilisp, a small parenthesized language for combinator terms such as `(s k k x)`.

Basic program flow:
    1. Lexer: produces a flat ConcreteSyntaxTree of parentheses, spaces and names
        - See skilisp/syntax/lexical.py
    2. Parser: builds an abstract syntax tree of Atoms and Applications from the tokens, without recursion
        - See skilisp/syntax/parser.py
    3. Evaluation: not done here. Trees are handed to whoever evaluates them

"""

from skilisp.lang.error import (
    EmptyInput, GenericException, LexError, ParseError, TrailingTokens, UnbalancedParentheses,
    UnexpectedCloseParen, UnexpectedOpenParenInAtom
)
from skilisp.syntax.lexical import tokenize
from skilisp.syntax.parser import parse, parse_many
from skilisp.syntax.tokens import ConcreteSyntaxTree, Name, Symbol
from skilisp.syntax.tree import Application, Atom
