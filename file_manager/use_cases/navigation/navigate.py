"""
Use case for moving the working directory cursor.
"""

import logging
from typing import Optional

from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.entities.entry import EntryKind
from file_manager.exceptions import OperationFailedError
from file_manager.ports.storage.storage_port import StoragePort


class NavigateUseCase:
    """The only use case allowed to change the cursor (``up`` and ``cd``)."""

    def __init__(
        self,
        storage: StoragePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage: Storage used to verify navigation targets
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._logger = logger or logging.getLogger(__name__)

    def up(self, cursor: WorkingDirectoryCursor) -> str:
        """
        Move the cursor to its parent. At the filesystem root this is a no-op.

        Returns:
            The cursor path after the move
        """
        if not cursor.at_root():
            cursor.move_to(cursor.parent())
        return cursor.path

    def cd(self, cursor: WorkingDirectoryCursor, raw: str) -> str:
        """
        Move the cursor to ``raw`` resolved against it.

        Returns:
            The cursor path after the move

        Raises:
            OperationFailedError: If the target is missing or not a directory
        """
        target = cursor.resolve(raw)
        self._logger.info(f"Changing directory to: {target}")
        if self._storage.stat(target) is not EntryKind.DIRECTORY:
            raise OperationFailedError(f"Not a directory: {target}")
        cursor.move_to(target)
        return cursor.path
