"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from typing import Optional
from unittest.mock import MagicMock

import pytest

from cmdshell.config.settings import Settings
from cmdshell.container import DependencyContainer
from cmdshell.ports.console.console_port import ConsolePort


class RecordingConsole(ConsolePort):
    """
    In-memory console: records output and replays scripted input.

    Scripted items that are exception instances are raised when reached.
    """

    def __init__(self, lines=None, keys=None):
        self.output = ""
        self.prompts: list[str] = []
        self.titles: list[str] = []
        self._lines = list(lines or [])
        self._keys = list(keys or [])

    @property
    def lines(self) -> list[str]:
        return self.output.splitlines()

    def write(self, text: str) -> None:
        self.output += text

    def write_line(self, text: str = "") -> None:
        self.output += text + "\n"

    def _next(self, queue: list) -> Optional[str]:
        if not queue:
            return None
        item = queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        self.output += prompt
        return self._next(self._lines)

    def read_key(self) -> Optional[str]:
        return self._next(self._keys)

    def set_title(self, title: str) -> None:
        self.titles.append(title)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing directory listings.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "a.txt")
        test_file2 = os.path.join(temp_dir, "b.py")

        with open(test_file1, "w") as f:
            f.write("0123456789")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "sub")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "c.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console_factory():
    """Factory building recording consoles with scripted input."""
    return RecordingConsole


@pytest.fixture
def recording_console():
    """Console that records output and returns no input."""
    return RecordingConsole()


@pytest.fixture
def settings(monkeypatch):
    """
    Settings built from a clean environment.

    Returns:
        Settings with all defaults
    """
    for key in list(os.environ):
        if key.startswith("CMDSHELL_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("CMDSHELL_EXIT_DELAY", "0")
    return Settings()


@pytest.fixture
def dependency_container(settings, mock_logger, recording_console):
    """
    Create a dependency container wired to the recording console.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    container._instances["console"] = recording_console
    return container
