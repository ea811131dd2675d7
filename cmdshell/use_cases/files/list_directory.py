"""
Use case for printing a directory listing table.
"""

import logging
from typing import Optional

from cmdshell.entities.entry import Entry
from cmdshell.exceptions import FileRepositoryError
from cmdshell.ports.console.console_port import ConsolePort
from cmdshell.ports.files.directory_repository_port import DirectoryRepositoryPort
from cmdshell.utils.columns import ColumnLayout


class ListDirectoryUseCase:
    """Use case for listing the entries of a directory as a bordered table."""

    def __init__(
        self,
        directory_repository: DirectoryRepositoryPort,
        console: ConsolePort,
        layout: Optional[ColumnLayout] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_repository: Repository for directory enumeration
            console: Console the table is written to
            layout: Column widths; defaults to the standard layout
            logger: Logger instance to use for logging
        """
        self._directory_repository = directory_repository
        self._console = console
        self._layout = layout or ColumnLayout()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str, recursive: bool = False) -> None:
        """
        Print the listing table for a directory.

        With ``recursive`` set, each subdirectory contributes its file rows and
        then its own nested table before the rows of the current level. An
        enumeration failure is printed as a row; the closing border is always
        printed.

        Args:
            directory: Path to the directory to list
            recursive: Whether to descend into subdirectories
        """
        border = self._layout.border()
        self._console.write_line(border)
        self._console.write_line(self._layout.header())
        self._console.write_line(border)
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            if recursive:
                for subdirectory in self._directories(directory):
                    for entry in self._files(subdirectory.path):
                        self._write_file(entry)
                    self.execute(subdirectory.path, recursive=True)

            directories = self._directories(directory)
            files = self._files(directory)
            for entry in directories:
                self._write_directory(entry)
            for entry in files:
                self._write_file(entry)
            self._logger.info(
                f"Found {len(directories)} directories and {len(files)} files"
            )
        except FileRepositoryError as e:
            self._logger.warning(f"Error listing {directory}: {e}")
            self._console.write_line(str(e))
        self._console.write_line(border)

    def _directories(self, directory: str) -> list[Entry]:
        try:
            return self._directory_repository.list_directories(directory)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directories: {e}")
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

    def _files(self, directory: str) -> list[Entry]:
        try:
            return self._directory_repository.list_files(directory)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing files: {e}")
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

    def _write_file(self, entry: Entry) -> None:
        self._console.write_line(
            self._layout.row(entry.name, entry.attributes_text(), f"{entry.size:,}")
        )

    def _write_directory(self, entry: Entry) -> None:
        self._console.write_line(self._layout.row(entry.name, entry.attributes_text()))
