"""
Use case running the read-dispatch loop of the shell.
"""

import logging
from collections.abc import Sequence
from typing import Optional

from cmdshell.entities.command_line import CommandLine, OptionSet
from cmdshell.ports.console.console_port import ConsolePort
from cmdshell.use_cases.shell.confirm_exit import ConfirmExitUseCase
from cmdshell.use_cases.shell.dispatch_options import DispatchOptionsUseCase


class RunShellUseCase:
    """
    Process startup arguments, then read and dispatch command lines until exit.
    """

    def __init__(
        self,
        dispatch_options: DispatchOptionsUseCase,
        confirm_exit: ConfirmExitUseCase,
        console: ConsolePort,
        prompt: str = "Demo >",
        terminators: Sequence[str] = ("bye", "exit"),
        title: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            dispatch_options: Dispatcher for option sets
            confirm_exit: Exit confirmation dialog
            console: Console used for the prompt
            prompt: Prompt text; a space is appended when printed
            terminators: Whole-line keywords that start the exit dialog
            title: Terminal title set when the interactive session starts
            logger: Logger instance to use for logging
        """
        self._dispatch_options = dispatch_options
        self._confirm_exit = confirm_exit
        self._console = console
        self._prompt = prompt
        self._terminators = tuple(terminators)
        self._title = title
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, args: Sequence[str] = (), run_once: Optional[bool] = None) -> int:
        """
        Run the shell.

        Args:
            args: Startup arguments, processed once as an option set
            run_once: Return right after the startup arguments. Defaults to
                True when any arguments were given.

        Returns:
            Process exit code
        """
        if run_once is None:
            run_once = bool(args)

        if args:
            self._dispatch_options.execute(OptionSet(args))
        if run_once:
            self._logger.info("Startup arguments processed, not entering interactive mode")
            return 0

        if self._title:
            self._console.set_title(self._title)

        while True:
            try:
                line = self._console.read_line(f"{self._prompt} ")
            except KeyboardInterrupt:
                self._console.write_line()
                self._logger.info("Interrupted at the prompt, leaving the shell")
                return 0
            if line is None:
                # End of input reads as an empty command, after which nothing more can arrive
                self._console.write_line()
                self._logger.info("End of input, leaving the shell")
                return 0

            command = CommandLine(line)
            if command.is_terminator(self._terminators):
                if self._confirm_exit.execute():
                    return 0
                continue
            if command.is_empty():
                continue
            self._dispatch_options.execute(command.option_set())
