"""
Use cases for creating, renaming and removing single files.
"""

import logging
from typing import Optional

from file_manager.exceptions import OperationFailedError
from file_manager.ports.storage.storage_port import StoragePort


class ManageFilesUseCase:
    """Use case for ``add``, ``rn`` and ``rm``."""

    def __init__(
        self,
        storage: StoragePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage: Storage the files live in
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._logger = logger or logging.getLogger(__name__)

    def create(self, path: str) -> None:
        """
        Create a new empty file; never overwrites.

        Raises:
            OperationFailedError: If the file exists or cannot be created
        """
        try:
            self._logger.info(f"Creating file: {path}")
            handle = self._storage.open_write(path, exclusive=True)
            handle.close()
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise OperationFailedError(f"Failed to create {path}: {str(e)}")

    def rename(self, old_path: str, new_path: str) -> None:
        """
        Rename an entry.

        Raises:
            OperationFailedError: If the source is missing or the target exists
        """
        try:
            self._logger.info(f"Renaming {old_path} to {new_path}")
            self._storage.rename(old_path, new_path)
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming: {e}")
            raise OperationFailedError(f"Failed to rename {old_path}: {str(e)}")

    def remove(self, path: str) -> None:
        """
        Remove a single file. Directories are refused, never recursed into.

        Raises:
            OperationFailedError: If removal fails
        """
        try:
            self._logger.info(f"Removing file: {path}")
            self._storage.unlink(path)
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error removing file: {e}")
            raise OperationFailedError(f"Failed to remove {path}: {str(e)}")
