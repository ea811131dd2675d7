"""
Local file system adapter implementation for directory enumeration.
"""

import logging
import os

from typing_extensions import override

from cmdshell.entities.entry import Entry
from cmdshell.exceptions import FileRepositoryError
from cmdshell.ports.files.directory_repository_port import DirectoryRepositoryPort


class LocalFileSystemAdapter(DirectoryRepositoryPort):
    """Local file system implementation of the directory repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _scan(self, directory: str) -> list[str]:
        """Return the sorted child paths of a directory."""
        self._validate_directory(directory)
        try:
            names = sorted(os.listdir(directory))
        except PermissionError:
            raise FileRepositoryError(f"Access to the path '{directory}' is denied.")
        except OSError as e:
            raise FileRepositoryError(f"Failed to list entries in {directory}: {e.strerror or e}")
        return [os.path.join(directory, name) for name in names]

    def _create_entries(self, paths: list[str]) -> list[Entry]:
        """
        Create Entry entities from a list of paths.

        Args:
            paths: List of paths to convert to Entry entities

        Returns:
            List of Entry entities
        """
        entries: list[Entry] = []
        for path in paths:
            try:
                entries.append(Entry(path))
            except FileRepositoryError as e:
                # Entry vanished or became unreadable between scan and stat
                self._logger.warning(f"Could not process entry {path}: {e}")
        return entries

    @override
    def list_directories(self, directory: str) -> list[Entry]:
        paths = [p for p in self._scan(directory) if os.path.isdir(p)]
        return self._create_entries(paths)

    @override
    def list_files(self, directory: str) -> list[Entry]:
        paths = [p for p in self._scan(directory) if not os.path.isdir(p)]
        return self._create_entries(paths)
