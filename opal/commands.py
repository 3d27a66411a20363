"""Built-in commands understood by the interactive prompt."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Command(ABC):
    """A prompt command; ``args`` holds the words typed after its name."""

    def __init__(self) -> None:
        self.args: list[str] = []

    @abstractmethod
    def can_handle(self, name: str) -> bool:
        """Whether this command answers to ``name``."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""


class HelpCommand(Command):
    """Lists the available commands."""

    DESCRIPTIONS: dict[str, str] = {
        "help": "Display available commands",
        "clear": "Clear the screen",
        "exit": "Exit the REPL",
    }

    def can_handle(self, name: str) -> bool:
        return name in ("help", "?")

    def execute(self) -> None:
        width = max(len(name) for name in self.DESCRIPTIONS) + 2
        lines = ["Available commands:\n\n"]
        lines.extend(f"  {name:<{width}}{desc}\n" for name, desc in self.DESCRIPTIONS.items())
        lines.append("\n")
        sys.stdout.write("".join(lines))
        sys.stdout.flush()


class ExitCommand(Command):
    """Leaves the prompt by raising ``SystemExit(0)``."""

    def can_handle(self, name: str) -> bool:
        return name == "exit"

    def execute(self) -> None:
        print("Exiting the REPL", flush=True)
        raise SystemExit(0)


class ClearCommand(Command):
    """Resets the terminal screen."""

    def can_handle(self, name: str) -> bool:
        return name == "clear"

    def execute(self) -> None:
        sys.stdout.write("\033c")
        sys.stdout.flush()


def create_commands() -> list[Command]:
    """A fresh set of the built-in commands, in the order they are tried."""
    return [HelpCommand(), ExitCommand(), ClearCommand()]