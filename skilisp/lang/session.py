"""Session control for skilisp. Feeds source lines (from a file or the command-line shell) to the lexer and parser,
and collects the resulting trees. Nothing is evaluated.
"""

from skilisp.lang.error import GenericException
from skilisp.syntax.lexical import tokenize
from skilisp.syntax.parser import build_forest


class Session:
    """Governs a skilisp session: reads expressions and keeps their trees (or tokens) in self.results."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, show_tokens=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path                # used for error messages
        self.cmd_line = cmd_line        # whether or not in command-line mode
        self.show_tokens = show_tokens  # whether results are token sequences instead of trees

        self.results = []

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException(path, "'{}' could not be opened")

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif not cmd_line:
            raise GenericException(msg="'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. Lines are joined with a space while the expression so far
        has more '(' than ')'. In command-line mode exprs can be ignored, but add_to_prev will indicate whether a line
        continuation is necessary. Returns updated value of line and add_to_prev.

        Only the line break and trailing spaces are stripped: a trailing tab is an atom character like any other, so
        '(i x)\\t' reads as two expressions, the second being the name '\\t' (and Session.add warns about it).
        """
        line = line.rstrip("\r\n").rstrip(" ")

        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_line_num = exprs.pop()
                line = prev + " " + line
                line_num = prev_line_num
            if line.strip(" "):
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Tokenizes and parses expr, appending every top-level tree (or the tokens) to self.results."""
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised

        tokens = tokenize(expr)
        for name in tokens.names():
            if "\t" in name:
                self.error_handler.warn(name, "'{}' contains a tab, which is read as part of the name")

        if self.show_tokens:
            self.results.append(tokens)
        else:
            self.results.extend(build_forest(tokens, expr))

        self.error_handler.remove_line(self.path)  # error was not raised

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)
