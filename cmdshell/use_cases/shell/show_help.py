"""
Use case for rendering the help text.
"""

import logging
from typing import Optional

import cmdshell
from cmdshell.ports.console.console_port import ConsolePort
from cmdshell.utils.columns import append_tab

# (aliases, description) rows of the command table
HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("li, list", "Lists all files in the current directory."),
    ("h, help", "Displays 'Help' contents."),
)


class ShowHelpUseCase:
    """Print product information and the table of available commands."""

    def __init__(
        self,
        console: ConsolePort,
        title: str = cmdshell.__title__,
        version: str = cmdshell.__version__,
        copyright: str = cmdshell.__copyright__,
        description: str = cmdshell.__description__,
        pad_length: int = 4,
        marker: str = "... ",
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console
        self._title = title
        self._version = version
        self._copyright = copyright
        self._description = description
        self._pad_length = pad_length
        self._marker = marker
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> None:
        self._logger.info("Showing help")
        write = self._console.write_line
        write(f"{self._title} Version {self._version}")
        write(self._copyright)
        write(self._description)
        write()
        write("Available commands:")
        write()
        for aliases, text in HELP_COMMANDS:
            write(
                append_tab("", 2, self._pad_length, self._marker)
                + append_tab(aliases, 4, self._pad_length, self._marker)
                + text
            )
        write()
