"""The interactive prompt: built-in commands, otherwise tokenize the line."""

from __future__ import annotations

import sys
from typing import TextIO

from opal.commands import create_commands
from opal.lexer import Lexer

PROMPT = "Opal > "
RULE = "-" * 40


class Repl:
    """Reads lines from ``stdin`` (standard input by default) until end of input."""

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin

    def start(self) -> None:
        """Run the prompt loop."""
        stream = self._stdin if self._stdin is not None else sys.stdin
        while True:
            sys.stdout.write(PROMPT)
            sys.stdout.flush()
            line = stream.readline()
            if not line:
                return
            self.run(line.removesuffix("\n"))

    def run(self, source: str) -> None:
        """Handle one line: a command when its first word names one, else tokens."""
        if not source:
            return

        words = source.split()
        name, args = (words[0], words[1:]) if words else ("", [])

        for command in create_commands():
            if command.can_handle(name):
                command.args = args
                command.execute()
                return

        lexer = Lexer(source)
        lexer.scan_tokens()
        print("Tokenizing source code")
        print(RULE)
        lexer.print_tokens()
        print(RULE, flush=True)