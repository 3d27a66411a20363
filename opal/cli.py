"""Command-line entry point: tokenize a file, or start the prompt."""

from __future__ import annotations

import sys

from opal.fileutil import file_exists, read_file
from opal.lexer import Lexer
from opal.repl import RULE, Repl


def main(argv: list[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Opal Language", flush=True)

    if not args:
        try:
            Repl().start()
        except Exception as exc:  # noqa: BLE001 - reported like any fatal error
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    path = args[0]
    if not file_exists(path):
        print(f"File does not exist: {path}", file=sys.stderr)
        return 1

    try:
        lexer = Lexer(read_file(path))
        lexer.scan_tokens()
        print(f"Tokenizing file: {path}")
        print(RULE)
        lexer.print_tokens()
        print(RULE, flush=True)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())