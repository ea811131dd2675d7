"""
Rich-backed console adapter implementing terminal input and output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from typing_extensions import override

from cmdshell.ports.console.console_port import ConsolePort

# platform keypress utilities
try:
    import msvcrt  # Windows-only
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


class RichConsoleAdapter(ConsolePort):
    """Console port backed by a rich Console printing plain, unstyled text."""

    def __init__(
        self,
        console: Console | None = None,
        stdin: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            console: Console to print to. Defaults to stdout with markup, highlighting
                and emoji disabled so rows are printed verbatim.
            stdin: Stream to read from. Defaults to sys.stdin.
            logger: Logger instance to use for logging.
        """
        self._console = console or Console(
            markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        self._stdin = stdin
        self._logger = logger or logging.getLogger(__name__)

    @property
    def _input(self) -> TextIO:
        return self._stdin or sys.stdin

    @override
    def write(self, text: str) -> None:
        self._console.print(text, end="", markup=False, highlight=False, emoji=False)

    @override
    def write_line(self, text: str = "") -> None:
        self._console.print(text, markup=False, highlight=False, emoji=False)

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            line = self._console.input(
                prompt, markup=False, emoji=False, stream=self._stdin
            )
        except EOFError:
            return None
        if self._stdin is not None and not line:
            # readline() signals end of input with an empty string
            return None
        return line.rstrip("\r\n")

    @override
    def read_key(self) -> Optional[str]:
        stream = self._input
        if stream.isatty():
            if msvcrt is not None:
                ch = msvcrt.getwch()
                self.write(ch)
                return ch
            if termios is not None and tty is not None:
                return self._read_key_cbreak(stream)

        # Not a terminal: take the first character of the next line
        line = stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")[:1]

    def _read_key_cbreak(self, stream: TextIO) -> Optional[str]:
        fd = stream.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            ch = stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        if not ch:
            return None
        self.write(ch)
        return ch

    @override
    def set_title(self, title: str) -> None:
        if not self._console.set_window_title(title):
            self._logger.debug(f"Terminal does not support window titles: {title}")
