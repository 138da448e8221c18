"""
Local file system adapter implementation for storage operations.
"""

import logging
import os
import stat as stat_mode
from typing import BinaryIO

from typing_extensions import override

from file_manager.entities.entry import EntryKind
from file_manager.exceptions import StorageError
from file_manager.ports.storage.storage_port import StoragePort


class LocalStorageAdapter(StoragePort):
    """Local file system implementation of the storage port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def stat(self, path: str) -> EntryKind:
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot stat {path}: {e}") from e
        if stat_mode.S_ISDIR(st.st_mode):
            return EntryKind.DIRECTORY
        return EntryKind.FILE

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def list_dir(self, path: str) -> list[str]:
        try:
            return os.listdir(path)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to list directory {path}: {e}") from e

    @override
    def open_read(self, path: str) -> BinaryIO:
        if os.path.isdir(path):
            raise StorageError(f"Path is a directory: {path}")
        try:
            return open(path, "rb")
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot open {path} for reading: {e}") from e

    @override
    def open_write(self, path: str, exclusive: bool = False) -> BinaryIO:
        mode = "xb" if exclusive else "wb"
        try:
            return open(path, mode)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot open {path} for writing: {e}") from e

    @override
    def rename(self, old_path: str, new_path: str) -> None:
        # os.rename silently replaces an existing target on POSIX
        if os.path.lexists(new_path):
            raise StorageError(f"Target already exists: {new_path}")
        try:
            os.rename(old_path, new_path)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to rename {old_path} to {new_path}: {e}") from e
        self._logger.debug(f"Renamed {old_path} -> {new_path}")

    @override
    def unlink(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            raise StorageError(f"Refusing to remove a directory: {path}")
        try:
            os.unlink(path)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e
        self._logger.debug(f"Removed {path}")

    @override
    def same_file(self, first: str, second: str) -> bool:
        try:
            return os.path.samefile(first, second)
        except (OSError, ValueError):
            return False
