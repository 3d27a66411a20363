"""Turns source text into a list of tokens."""

from __future__ import annotations

import sys
from typing import TextIO

from opal.errors import ErrorLog
from opal.tokenizers import ScanState, create_tokenizers
from opal.tokens import Token, TokenType


class Lexer:
    """Scans a source string; problems are recorded in ``errors``."""

    def __init__(self, source: str, errors: ErrorLog | None = None) -> None:
        self.errors = errors if errors is not None else ErrorLog()
        self._state = ScanState(source, self.errors)
        self._tokenizers = create_tokenizers()

    @property
    def tokens(self) -> list[Token]:
        """Tokens scanned so far."""
        return list(self._state.tokens)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return the tokens, ending with EOF."""
        state = self._state
        while not state.at_end():
            state.start = state.current
            self._scan_token()
        state.tokens.append(Token(TokenType.EOF_TOKEN, "EOF", state.line, state.column))
        return list(state.tokens)

    def _scan_token(self) -> None:
        state = self._state
        c = state.source[state.current]

        if c in (" ", "\r", "\t"):
            state.current += 1
            state.column += 1
            return

        if c == "\n":
            state.current += 1
            state.line += 1
            state.column = 1
            return

        for tokenizer in self._tokenizers:
            if tokenizer.can_handle(state, c):
                tokenizer.tokenize(state)
                return

        self.errors.lexer_error(state.line, state.column, f"Unexpected character '{c}'")
        state.current += 1
        state.column += 1

    def format_tokens(self) -> str:
        """One line per scanned token, each ending in a newline."""
        return "".join(
            f"Type: {int(token.type)} Value: '{token.value}' "
            f"Line: {token.line} Column: {token.column}\n"
            for token in self._state.tokens
        )

    def print_tokens(self, out: TextIO | None = None) -> None:
        """Write the scanned tokens to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.format_tokens())