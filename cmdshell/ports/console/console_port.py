"""
Console port interface defining the contract for terminal input and output.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsolePort(ABC):
    """Port interface for the interactive terminal."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text without a trailing newline."""
        pass

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""
        pass

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Print a prompt and read one line of input.

        Returns:
            The line without its newline, or None at end of input
        """
        pass

    @abstractmethod
    def read_key(self) -> Optional[str]:
        """
        Read a single keypress.

        Returns:
            The character typed, or None at end of input
        """
        pass

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set the terminal window title where supported."""
        pass
