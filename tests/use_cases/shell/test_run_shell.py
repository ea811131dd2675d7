"""
Tests for the RunShellUseCase.
"""

from unittest.mock import MagicMock

import pytest

from cmdshell.entities.command_line import OptionSet
from cmdshell.use_cases.shell.confirm_exit import ConfirmExitUseCase
from cmdshell.use_cases.shell.dispatch_options import DispatchOptionsUseCase
from cmdshell.use_cases.shell.run_shell import RunShellUseCase


@pytest.fixture
def dispatch_options():
    return MagicMock(spec=DispatchOptionsUseCase)


@pytest.fixture
def make_shell(dispatch_options, console_factory, mock_logger):
    def _make(lines=(), keys=(), confirm_exit=None, **kwargs):
        console = console_factory(lines=lines, keys=keys)
        if confirm_exit is None:
            confirm_exit = ConfirmExitUseCase(console, exit_delay=0, sleep=MagicMock(), logger=mock_logger)
        shell = RunShellUseCase(dispatch_options, confirm_exit, console, logger=mock_logger, **kwargs)
        return shell, console

    return _make


def dispatched(dispatch_options):
    return [c.args[0].raw_tokens() for c in dispatch_options.execute.call_args_list]


class TestRunShellUseCase:
    """Test cases for the RunShellUseCase."""

    def test_startup_arguments_run_once(self, make_shell, dispatch_options):
        """Test startup arguments are dispatched once without prompting."""
        shell, console = make_shell(lines=["-h"])

        assert shell.execute(["-li", "-h", "-li"]) == 0
        assert dispatched(dispatch_options) == [["-h", "-li"]]
        assert console.prompts == []

    def test_startup_arguments_are_not_retokenized(self, make_shell, dispatch_options):
        """Test each startup argument is one token, even with spaces."""
        shell, _ = make_shell()

        shell.execute(["my folder", "-h"])

        assert dispatched(dispatch_options) == [["my folder", "-h"]]

    def test_interactive_dispatch(self, make_shell, dispatch_options):
        """Test each entered line is dispatched as an option set."""
        shell, console = make_shell(lines=["-li -h", "  ", "", "/help"])

        assert shell.execute() == 0
        assert dispatched(dispatch_options) == [["-li", "-h"], ["/help"]]
        assert console.prompts == ["Demo > "] * 5

    def test_startup_arguments_then_interactive(self, make_shell, dispatch_options):
        """Test run_once=False processes arguments and then reads input."""
        shell, console = make_shell(lines=["-li"])

        shell.execute(["-h"], run_once=False)

        assert dispatched(dispatch_options) == [["-h"], ["-li"]]
        assert len(console.prompts) == 2

    def test_exit_confirmed(self, make_shell, dispatch_options):
        """Test bye followed by Y ends the session with code 0."""
        shell, console = make_shell(lines=["bye", "-h"], keys=["Y"])

        assert shell.execute() == 0
        assert dispatched(dispatch_options) == []
        assert console.prompts == ["Demo > "]
        assert "Goodbye!" in console.lines

    def test_exit_aborted_returns_to_prompt(self, make_shell, dispatch_options):
        """Test bye followed by N keeps the shell running."""
        shell, console = make_shell(lines=["BYE", "-h", "exit"], keys=["n", "y"])

        assert shell.execute() == 0
        assert dispatched(dispatch_options) == [["-h"]]
        assert console.prompts == ["Demo > "] * 3

    def test_terminator_is_not_dispatched(self, make_shell, dispatch_options):
        """Test exit keywords never reach the dispatcher as unrecognized tokens."""
        confirm_exit = MagicMock(spec=ConfirmExitUseCase)
        confirm_exit.execute.return_value = False
        shell, _ = make_shell(lines=["exit", "Bye"], confirm_exit=confirm_exit)

        shell.execute()

        assert confirm_exit.execute.call_count == 2
        dispatch_options.execute.assert_not_called()

    def test_custom_prompt_and_terminators(self, make_shell, dispatch_options):
        """Test the prompt and keywords are injected."""
        confirm_exit = MagicMock(spec=ConfirmExitUseCase)
        confirm_exit.execute.return_value = True
        shell, console = make_shell(
            lines=["bye", "quit"],
            confirm_exit=confirm_exit,
            prompt="shell>",
            terminators=("quit",),
        )

        shell.execute()

        assert console.prompts == ["shell> ", "shell> "]
        assert dispatched(dispatch_options) == [["bye"]]

    def test_end_of_input_ends_session(self, make_shell, dispatch_options):
        """Test end of input is treated as an empty command and ends the loop."""
        shell, console = make_shell(lines=[])

        assert shell.execute() == 0
        dispatch_options.execute.assert_not_called()

    def test_keyboard_interrupt_ends_session(self, make_shell, dispatch_options):
        """Test Ctrl+C at the prompt leaves the shell."""
        shell, _ = make_shell(lines=["-h", KeyboardInterrupt(), "-li"])

        assert shell.execute() == 0
        assert dispatched(dispatch_options) == [["-h"]]

    def test_keyboard_interrupt_while_confirming_resumes(self, make_shell, dispatch_options):
        """Test Ctrl+C at the Y/N question counts as N and the shell keeps reading."""
        shell, console = make_shell(lines=["bye", "-h"], keys=[KeyboardInterrupt()])

        assert shell.execute() == 0
        assert dispatched(dispatch_options) == [["-h"]]
        assert console.prompts == ["Demo > "] * 3
        assert "Goodbye!" not in console.output

    def test_title_set_for_interactive_session(self, make_shell):
        """Test the terminal title is set only when entering interactive mode."""
        shell, console = make_shell(title="cmdshell")
        shell.execute(["-h"])
        assert console.titles == []

        shell.execute()
        assert console.titles == ["cmdshell"]

    def test_option_set_passed_through(self, make_shell, dispatch_options):
        """Test the dispatcher receives OptionSet instances."""
        shell, _ = make_shell(lines=["-h -h"])

        shell.execute()

        (options,) = dispatch_options.execute.call_args.args
        assert isinstance(options, OptionSet)
        assert options.raw_tokens() == ["-h"]
