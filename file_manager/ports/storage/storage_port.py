"""
Storage port interface defining the contract for filesystem access.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from file_manager.entities.entry import EntryKind


class StoragePort(ABC):
    """Port interface for the storage operations the shell is allowed to perform."""

    @abstractmethod
    def stat(self, path: str) -> EntryKind:
        """
        Classify an existing entry.

        Args:
            path: Absolute path of the entry

        Returns:
            EntryKind of the entry

        Raises:
            StorageError: If the entry cannot be stat'ed
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether an entry exists.

        Args:
            path: Absolute path of the entry

        Returns:
            True if something exists at path, False otherwise
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """
        List the entry names of a directory.

        Args:
            path: Absolute path of the directory

        Returns:
            Names of the entries, in storage order

        Raises:
            StorageError: If the directory cannot be listed
        """
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """
        Open a file for binary reading.

        Args:
            path: Absolute path of the file

        Returns:
            Readable binary stream; the caller closes it

        Raises:
            StorageError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def open_write(self, path: str, exclusive: bool = False) -> BinaryIO:
        """
        Open a file for binary writing.

        Args:
            path: Absolute path of the file
            exclusive: If True, fail when the file already exists instead of truncating it

        Returns:
            Writable binary stream; the caller closes it

        Raises:
            StorageError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        """
        Atomically rename an entry.

        Raises:
            StorageError: If the rename fails or new_path already exists
        """
        pass

    @abstractmethod
    def unlink(self, path: str) -> None:
        """
        Remove a single file (never a directory).

        Raises:
            StorageError: If removal fails
        """
        pass

    @abstractmethod
    def same_file(self, first: str, second: str) -> bool:
        """
        Check whether two paths name the same underlying file.

        Symlinks and hard links count as the same file as their target.

        Returns:
            True if both exist and refer to the same file, False otherwise
        """
        pass
