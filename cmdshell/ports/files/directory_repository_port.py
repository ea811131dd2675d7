"""
Directory repository port interface defining the contract for directory enumeration.
"""

from abc import ABC, abstractmethod

from cmdshell.entities.entry import Entry


class DirectoryRepositoryPort(ABC):
    """Port interface for directory enumeration."""

    @abstractmethod
    def list_directories(self, directory: str) -> list[Entry]:
        """
        List the subdirectories of a directory.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            List of directory Entry entities, in name order

        Raises:
            FileRepositoryError: If enumeration fails
        """
        pass

    @abstractmethod
    def list_files(self, directory: str) -> list[Entry]:
        """
        List the files of a directory.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            List of file Entry entities, in name order

        Raises:
            FileRepositoryError: If enumeration fails
        """
        pass
