"""skilisp syntax: concrete tokens, the lexer, the abstract syntax tree and the parser."""
