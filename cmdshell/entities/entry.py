"""
Directory entry domain entity.
"""

import os

from cmdshell.exceptions import FileRepositoryError


class Entry:
    """
    File system entry entity (file or directory) as shown in a directory listing.
    """

    def __init__(self, path: str):
        """
        Initialize the Entry entity.

        Args:
            path: Path to the file or directory

        Raises:
            FileRepositoryError: If path is invalid or the entry doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise FileRepositoryError(f"Entry does not exist: {path}")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = os.path.isdir(self.path)
        self.is_link = os.path.islink(self.path)
        self.size = self._find_size()
        self.attributes = self._find_attributes()

    def _find_size(self) -> int:
        """Get the file size in bytes."""
        if self.is_dir:
            # Directories are listed without a size
            return 0
        try:
            if self.is_link:
                # Size of the link itself; the target may be gone
                return os.lstat(self.path).st_size
            return os.path.getsize(self.path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file size: {e}")

    def _find_attributes(self) -> list[str]:
        flags: list[str] = []
        if os.path.exists(self.path) and not os.access(self.path, os.W_OK):
            flags.append("ReadOnly")
        if self.name.startswith("."):
            flags.append("Hidden")
        if self.is_dir:
            flags.append("Directory")
        if self.is_link:
            flags.append("ReparsePoint")
        return flags or ["Normal"]

    def attributes_text(self) -> str:
        """Attribute flags joined for display, e.g. 'Hidden, Directory'."""
        return ", ".join(self.attributes)
