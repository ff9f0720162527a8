#!/usr/bin/env python3
"""
Interactive REPL for ArithLang.

Reads one line at a time, parses it and prints the resulting tree.
Errors are reported and the prompt comes back.

Usage:
    arith-repl                  # Tree output
    arith-repl --format source  # Canonical source output
    arith-repl --tokens         # Also print the raw tokens

Author: xwest
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from . import __version__
from .lexer import LexError, tokenize
from .parser import Parser, ParseError, format_tree, to_source

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("tree", "source")


@dataclass
class ReplConfig:
    """Settings for a REPL session."""
    prompt: str = ">>> "
    exit_command: str = "exit"
    output_format: str = "tree"
    show_tokens: bool = False
    verbose: bool = False


class Repl:
    """Line-oriented read-parse-print loop."""

    def __init__(self, config: ReplConfig,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.config = config
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.parser = Parser("<stdin>")

    def run(self) -> int:
        print("Welcome to the ArithLang REPL!", file=self.stdout)

        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line or line.strip() == self.config.exit_command:
                break

            self.handle_line(line.rstrip("\n"))

        logger.debug("REPL session finished")
        return 0

    def handle_line(self, line: str) -> bool:
        """Parse and print one line. Returns False when the line had an error."""
        try:
            if self.config.show_tokens:
                for token in tokenize(line, "<stdin>"):
                    print(token, file=self.stdout)

            program = self.parser.parse_program(line)
        except (LexError, ParseError) as e:
            logger.debug("Rejected input %r: %s", line, e.diagnostic.message)
            print(e, file=self.stderr, end="")
            return False

        if self.config.output_format == "source":
            print(to_source(program), file=self.stdout)
        else:
            print(format_tree(program), file=self.stdout)
        return True


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arith-repl",
        description="Interactive parser for ArithLang expressions",
    )
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS,
                        default="tree", help="How to print parsed programs")
    parser.add_argument("--tokens", action="store_true",
                        help="Print the token list before each tree")
    parser.add_argument("--prompt", default=">>> ", help="Input prompt")
    parser.add_argument("--exit-command", default="exit",
                        help="A line consisting of this word ends the session")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(argv: Optional[List[str]] = None) -> ReplConfig:
    args = build_arg_parser().parse_args(argv)
    return ReplConfig(
        prompt=args.prompt,
        exit_command=args.exit_command,
        output_format=args.output_format,
        show_tokens=args.tokens,
        verbose=args.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = config_from_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return Repl(config).run()


if __name__ == "__main__":
    sys.exit(main())
