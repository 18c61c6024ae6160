"""Error handling for skilisp. Only GenericExceptions should be encountered while reading source: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

The front end is fail-fast: the first LexError/ParseError aborts the whole tokenize/parse call, and nothing is
recovered.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a skilisp error/warning."""
    MSG = "{}"

    def __init__(self, exprs=None, msg=None, internal=False):
        """exprs is the snippet(s) substituted into msg (defaults to the class's MSG template)."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        if msg is None:
            msg = self.MSG

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.internal = internal

        super().__init__(self.msg)


class LexError(GenericException):
    """Raised by the lexer. Aborts the scan: no partial token sequence is returned."""


class UnexpectedOpenParenInAtom(LexError):
    MSG = "'{}' has '(' immediately after an atom"


class ParseError(GenericException):
    """Raised by the parser. Aborts the parse: no partial tree is returned."""


class UnbalancedParentheses(ParseError):
    MSG = "'{}' has an unclosed '('"


class UnexpectedCloseParen(ParseError):
    MSG = "'{}' has ')' where an expression was expected"


class TrailingTokens(ParseError):
    MSG = "'{}' has trailing input after a complete expression"


class EmptyInput(ParseError):
    MSG = "expression cannot be empty"


class ErrorHandler:
    """Context manager that reports skilisp errors/warnings. GenericExceptions, KeyboardInterrupt and RecursionError
    are reported and suppressed (unless fatal); any other exception is reported as internal and then re-raised.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called before tokenizing/parsing line."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a successful parse."""
        self.traceback[path] = (None, None)

    def _location(self):
        """Returns 'file:line_num: ' for the most recently registered line, or '' if there is none."""
        for file, (line, line_num) in reversed(list(self.traceback.items())):
            if line is not None:
                return f"{file}:{line_num}: "
        return ""

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args (same signature as GenericException)."""
        error = GenericException(*args, **kwargs)

        warning_msg = colored(self._location(), attrs=["bold"])
        warning_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(warning_msg)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line is not None:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # reset (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException(msg="keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException(msg="expression is nested too deeply (maximum recursion depth exceeded)"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"{exc_type.__name__}: {exc_val}", "unknown error: '{}'", internal=True))
            do_exit = True

        return not do_exit
