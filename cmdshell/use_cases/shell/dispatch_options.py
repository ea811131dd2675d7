"""
Use case for dispatching the option tokens of one command line.
"""

import logging
import os
from collections.abc import Callable, Iterable
from typing import Optional

from cmdshell.entities.command_line import OptionSet
from cmdshell.exceptions import UnrecognizedOptionError
from cmdshell.ports.console.console_port import ConsolePort
from cmdshell.use_cases.files.list_directory import ListDirectoryUseCase
from cmdshell.use_cases.shell.show_help import ShowHelpUseCase


class DispatchOptionsUseCase:
    """Route each option token of an option set to its command handler."""

    def __init__(
        self,
        list_directory: ListDirectoryUseCase,
        show_help: ShowHelpUseCase,
        console: ConsolePort,
        recursive_list: bool = False,
        current_directory: Callable[[], str] = os.getcwd,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            list_directory: Handler for the 'list' command
            show_help: Handler for the 'help' command
            console: Console diagnostics are written to
            recursive_list: Whether 'list' descends into subdirectories
            current_directory: Returns the directory 'list' enumerates
            logger: Logger instance to use for logging
        """
        self._list_directory = list_directory
        self._show_help = show_help
        self._console = console
        self._recursive_list = recursive_list
        self._current_directory = current_directory
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[], None]] = {
            "list": self._list,
            "help": self._show_help.execute,
        }

    def execute(self, tokens: Iterable[str] | OptionSet) -> list[str]:
        """
        Dispatch the tokens in order after collapsing duplicates.

        Args:
            tokens: Raw tokens or an already built OptionSet

        Returns:
            Canonical names of the commands that ran, in order
        """
        options = tokens if isinstance(tokens, OptionSet) else OptionSet(tokens)
        self._logger.info(f"Dispatching options: {options.raw_tokens()}")
        executed: list[str] = []
        for option in options:
            try:
                command = option.command()
            except UnrecognizedOptionError as e:
                self._logger.info(f"Unrecognized token: {option.raw}")
                self._console.write_line(str(e))
                continue
            self._handlers[command]()
            executed.append(command)
        return executed

    def _list(self) -> None:
        self._list_directory.execute(self._current_directory(), recursive=self._recursive_list)
