"""Reads skilisp files or runs the command-line reader, printing the syntax tree of every expression. Uses the error
handling context manager. Called from the skilisp console script.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered.
"""

import argparse
import sys

from skilisp.lang.error import ErrorHandler
from skilisp.lang.session import Session
from skilisp.lang.shell import Shell


def main(argv=None):
    """Runs the skilisp reader. Called from the skilisp console script."""
    assert sys.version_info >= (3, 7), "skilisp cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="skilisp")
        parser.add_argument("file", help="file to read (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", help="print concrete tokens instead of syntax trees", action="store_true")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, show_tokens=args.tokens)

            for result in sess.results:
                if args.tokens:
                    print(" ".join(repr(token) for token in result))
                else:
                    print(result.display())

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
