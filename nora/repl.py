"""Interactive shell for Nora. Uses cmd as backend, termcolor for error output."""

from __future__ import annotations

import argparse
import cmd
import logging
import sys

from termcolor import colored

from nora import config
from nora.errors import NoraError
from nora.interpreter import Interpreter, Outcome
from nora.printer import to_repr

logger = logging.getLogger(__name__)

BANNER = "Nora Lisp Interpreter"


def format_error(error: NoraError, color: bool = True) -> str:
    label = "Error: "
    if color:
        label = colored(label, "red", attrs=["bold"])
    return label + str(error)


class Shell(cmd.Cmd):
    """Read-eval-print loop: one line of input per iteration."""
    intro = BANNER
    prompt = "> "

    def __init__(self, interp: Interpreter | None = None, color: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()
        self.color = color
        self.prompt = config.get_prompt()

    def cmdloop(self, intro=None):
        """Like cmd.Cmd.cmdloop, but end of input is reported as None so that
        a line reading `EOF` is evaluated as Lisp like any other."""
        self.preloop()
        intro = self.intro if intro is None else intro
        if intro:
            self.stdout.write(str(intro) + "\n")
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.onecmd(self.precmd(line))
        self.postloop()

    def read_line(self) -> str | None:
        """Next input line without its newline, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line):
        # Every line is Lisp source; bypass cmd's do_<word> dispatch except for
        # `exit`, which ends the session.
        if line.strip() == "exit":
            return self.do_exit(line)
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates each expression on the line and prints each result."""
        self.run(line)

    def run(self, line: str) -> Outcome:
        outcome = self.interp.feed(line)
        for value in outcome.values:
            self.stdout.write(to_repr(value) + "\n")
        if outcome.error is not None:
            logger.debug("evaluation failed (%s): %s", outcome.kind, outcome.error)
            self.stdout.write(format_error(outcome.error, self.color) + "\n")
        return outcome

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nora", description=BANNER)
    parser.add_argument("-c", "--command", help="evaluate CODE, print the results and exit")
    parser.add_argument("--no-color", action="store_true", help="disable colored error output")
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="host recursion limit (default: $NORA_RECURSION_LIMIT or 10000)")
    parser.add_argument("--log-level", default=None, help="logging level (default: $NORA_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Runs the nora interpreter. Called from the `nora` console script."""
    args = build_arg_parser().parse_args(argv)

    level = config.get_log_level()
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    limit = args.recursion_limit or config.get_recursion_limit()
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)

    color = config.use_color() and not args.no_color
    shell = Shell(color=color)

    if args.command is not None:
        return 0 if shell.run(args.command).ok else 1

    shell.cmdloop()
    return 0
