"""
Use case for listing a directory.
"""

import logging
import os
from typing import Optional

from file_manager.entities.entry import DirectoryEntry, EntryKind
from file_manager.exceptions import OperationFailedError, StorageError
from file_manager.ports.storage.storage_port import StoragePort


class ListDirectoryUseCase:
    """Use case for listing a directory, directories first, each group sorted by name."""

    def __init__(
        self,
        storage: StoragePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage: Storage used to list and classify entries
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._logger = logger or logging.getLogger(__name__)

    def _classify(self, directory: str, name: str) -> EntryKind:
        try:
            return self._storage.stat(os.path.join(directory, name))
        except StorageError as e:
            # e.g. a dangling symlink
            self._logger.info(f"Could not stat {name}, listing it as a file: {e}")
            return EntryKind.FILE

    def execute(self, directory: str) -> list[DirectoryEntry]:
        """
        List a directory.

        Args:
            directory: Absolute path of the directory to list

        Returns:
            Directory entries followed by file entries, each group in ascending name order

        Raises:
            OperationFailedError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {directory}")
            if self._storage.stat(directory) is not EntryKind.DIRECTORY:
                raise OperationFailedError(f"Path is not a directory: {directory}")

            directories: list[DirectoryEntry] = []
            files: list[DirectoryEntry] = []
            for name in self._storage.list_dir(directory):
                entry = DirectoryEntry(name, self._classify(directory, name))
                (directories if entry.is_dir else files).append(entry)

            directories.sort(key=lambda e: e.name)
            files.sort(key=lambda e: e.name)
            entries = directories + files
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise OperationFailedError(f"Failed to list {directory}: {str(e)}")
