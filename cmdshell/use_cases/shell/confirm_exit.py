"""
Use case for confirming that the user wants to leave the shell.
"""

import logging
import time
from collections.abc import Callable
from typing import Optional

from cmdshell.ports.console.console_port import ConsolePort

CONFIRM_PROMPT = "Continue on exit? (Y/N)"
FAREWELL = "Goodbye!"
INVALID_INPUT = "Invalid input!"


class ConfirmExitUseCase:
    """Ask for a Y/N keypress until a valid answer is given."""

    def __init__(
        self,
        console: ConsolePort,
        exit_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console
        self._exit_delay = exit_delay
        self._sleep = sleep
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> bool:
        """
        Prompt until the user answers Y or N.

        End of input and Ctrl+C both count as N.

        Returns:
            True when exit is confirmed, False to resume the shell
        """
        while True:
            self._console.write_line(CONFIRM_PROMPT)
            try:
                key = self._console.read_key()
            except KeyboardInterrupt:
                self._console.write_line()
                self._logger.info("Interrupted while confirming exit, resuming")
                return False
            self._console.write_line()
            if key is None:
                self._logger.info("End of input while confirming exit, resuming")
                return False

            answer = key.upper()
            if answer == "Y":
                self._logger.info("Exit confirmed")
                self._console.write_line(FAREWELL)
                self._sleep(self._exit_delay)
                return True
            if answer == "N":
                self._logger.info("Exit aborted")
                return False
            self._console.write_line(INVALID_INPUT)
