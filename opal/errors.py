"""Collection and reporting of diagnostics raised while processing source code."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class ErrorInfo:
    """A single reported diagnostic."""

    message: str
    line: int
    column: int
    source: str = ""


@dataclass
class ErrorLog:
    """Records diagnostics and echoes each one to a text stream.

    When no stream is given, messages go to whatever ``sys.stderr`` is at
    the time of reporting.
    """

    stream: TextIO | None = None
    errors: list[ErrorInfo] = field(default_factory=list)

    def error(self, line: int, column: int, message: str) -> None:
        """Report a diagnostic without a context label."""
        self.report(line, column, "", message)

    def lexer_error(self, line: int, column: int, message: str) -> None:
        """Report a diagnostic raised while scanning."""
        self.report(line, column, "Lexical error", message)

    def report(self, line: int, column: int, where: str, message: str) -> None:
        """Record a diagnostic and write it to the stream."""
        self.errors.append(ErrorInfo(message=message, line=line, column=column, source=where))
        prefix = f"[line {line}, column {column}] "
        if where:
            prefix += f"{where}: "
        out = self.stream if self.stream is not None else sys.stderr
        print(prefix + message, file=out)

    def had_error(self) -> bool:
        """Whether anything has been reported since the last reset."""
        return bool(self.errors)

    def reset(self) -> None:
        """Forget every recorded diagnostic."""
        self.errors.clear()