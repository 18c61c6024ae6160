"""Handles interactive/command-line mode for skilisp. Uses cmd as backend."""

import cmd

from skilisp.syntax.lexical import tokenize


class Shell(cmd.Cmd):
    """skilisp reader shell: prints the syntax tree of every expression typed in."""
    intro = "skilisp reader :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def onecmd(self, line):
        """While an expression is unfinished, every line but EOF continues it, even one starting with a command."""
        if self._tmp_line and line != "EOF":
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Reads arbitrary skilisp expression(s)."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if self._tmp_line:
                line = self._tmp_line + " " + line
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, bool(self._tmp_line))

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.add(line, self.line_num)
                while self.sess.results:
                    print(self.sess.pop().display())

    def do_tokens(self, arg):
        """Prints the concrete tokens of arg instead of its tree."""
        with self.sess.error_handler:
            self.line_num += 1
            self.sess.error_handler.register_line(self.sess.path, arg, self.line_num)
            for token in tokenize(arg):
                print(repr(token))
            self.sess.error_handler.remove_line(self.sess.path)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the skilisp reader!\n\n"
              "skilisp is a tiny parenthesized language for combinator terms. This shell \n"
              "reads expressions and shows the tree an evaluator would receive; it does \n"
              "not evaluate anything.\n\n"
              "Try it out by typing '(s k k x)'. Unfinished expressions continue on the \n"
              "next line, and 'tokens (k x y)' shows the tokens instead of the tree.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits reader."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits reader."""
        return True
