import time

import pytest

from opal.commands import (
    ClearCommand,
    Command,
    ExitCommand,
    HelpCommand,
    create_commands,
)


def _find(commands, name):
    return next((cmd for cmd in commands if cmd.can_handle(name)), None)


def test_create_all_commands():
    commands = create_commands()
    assert commands
    assert _find(commands, "help") is not None
    assert _find(commands, "clear") is not None
    assert _find(commands, "exit") is not None


def test_command_kinds():
    kinds = [type(cmd) for cmd in create_commands()]
    assert kinds == [HelpCommand, ExitCommand, ClearCommand]


def test_command_uniqueness():
    handled = []
    for cmd in create_commands():
        for name in ("help", "clear", "exit"):
            if cmd.can_handle(name):
                handled.append(name)
    assert sorted(handled) == ["clear", "exit", "help"]


def test_command_priority():
    class AlwaysMatch(Command):
        def can_handle(self, name):
            return True

        def execute(self):
            pass

    commands = create_commands()
    commands.append(AlwaysMatch())
    index = next(i for i, cmd in enumerate(commands) if cmd.can_handle("help"))
    assert index < len(commands) - 1


def test_case_sensitive_names():
    commands = create_commands()
    assert _find(commands, "HELP") is None
    assert _find(commands, "CLEAR") is None
    assert _find(commands, "EXIT") is None


def test_names_with_spaces_not_matched():
    assert _find(create_commands(), "  help  ") is None


def test_help_alias():
    assert HelpCommand().can_handle("?") is True
    assert ExitCommand().can_handle("?") is False
    assert ClearCommand().can_handle("?") is False


def test_unknown_command():
    assert _find(create_commands(), "unknown_command") is None


def test_empty_name_not_matched():
    assert [cmd.can_handle("") for cmd in create_commands()] == [False, False, False]


def test_help_output(capsys):
    _find(create_commands(), "help").execute()
    out = capsys.readouterr().out
    assert "Available commands" in out
    assert "help" in out
    assert "clear" in out
    assert "exit" in out


def test_help_output_layout(capsys):
    HelpCommand().execute()
    out = capsys.readouterr().out
    assert out.startswith("Available commands:\n\n")
    assert "  help   Display available commands\n" in out
    assert "  clear  Clear the screen\n" in out
    assert "  exit   Exit the REPL\n" in out
    assert out.endswith("\n\n")


def test_help_with_arguments(capsys):
    help_command = _find(create_commands(), "help")
    help_command.args = ["arg1", "arg2", "arg3"]
    help_command.execute()
    assert "Available commands" in capsys.readouterr().out
    assert help_command.args == ["arg1", "arg2", "arg3"]


def test_clear_output(capsys):
    _find(create_commands(), "clear").execute()
    assert capsys.readouterr().out == "\033c"


def test_execution_order_outputs_differ(capsys):
    commands = create_commands()
    _find(commands, "help").execute()
    help_output = capsys.readouterr().out
    _find(commands, "clear").execute()
    clear_output = capsys.readouterr().out
    assert help_output != clear_output
    assert "Available commands" in help_output
    assert "\033c" in clear_output


def test_exit_command(capsys):
    with pytest.raises(SystemExit) as info:
        _find(create_commands(), "exit").execute()
    assert info.value.code == 0
    assert "Exiting the REPL" in capsys.readouterr().out


def test_custom_command(capsys):
    class CustomCommand(Command):
        def can_handle(self, name):
            return name == "custom"

        def execute(self):
            print("Custom command executed")

    commands = create_commands()
    commands.append(CustomCommand())
    found = _find(commands, "custom")
    found.execute()
    assert "Custom command executed" in capsys.readouterr().out
    assert found.args == []
    assert len(commands) == 4


def test_new_commands_have_no_arguments():
    assert all(cmd.args == [] for cmd in create_commands())


def test_factory_is_fast():
    began = time.perf_counter()
    sizes = {len(create_commands()) for _ in range(1000)}
    elapsed = time.perf_counter() - began
    assert sizes == {3}
    assert elapsed < 1.0