"""
Use cases for copying and moving a file into a directory.
"""

import logging
import os
from typing import Optional

from file_manager.entities.entry import EntryKind
from file_manager.exceptions import OperationFailedError
from file_manager.ports.storage.storage_port import StoragePort
from file_manager.use_cases.streams.pipeline import StreamJob, StreamPipeline


class TransferFilesUseCase:
    """Use case for ``cp`` and ``mv``: always into an existing directory, under the source's name."""

    def __init__(
        self,
        storage: StoragePort,
        pipeline: StreamPipeline,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage: Storage used for precondition checks and unlinking
            pipeline: Pipeline streaming the bytes
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._pipeline = pipeline
        self._logger = logger or logging.getLogger(__name__)

    def _target_for(self, source: str, destination_dir: str) -> str:
        """Check the preconditions and return the effective destination path."""
        if self._storage.stat(source) is EntryKind.DIRECTORY:
            raise OperationFailedError(f"Source is a directory: {source}")
        if self._storage.stat(destination_dir) is not EntryKind.DIRECTORY:
            raise OperationFailedError(f"Destination is not a directory: {destination_dir}")
        target = os.path.join(destination_dir, os.path.basename(source))
        # Aliased directories (symlinks, bind mounts) can reach the source under another name
        if self._storage.exists(target) and self._storage.same_file(source, target):
            raise OperationFailedError(f"Source and destination are the same file: {source}")
        return target

    def copy(self, source: str, destination_dir: str) -> str:
        """
        Stream ``source`` into ``destination_dir``.

        Returns:
            Path of the new copy

        Raises:
            OperationFailedError: If a precondition fails or the copy does not complete
        """
        try:
            self._logger.info(f"Copying {source} into {destination_dir}")
            target = self._target_for(source, destination_dir)
            self._pipeline.run(StreamJob(source=source, destination=target))
            return target
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise OperationFailedError(f"Failed to copy {source}: {str(e)}")

    def move(self, source: str, destination_dir: str) -> str:
        """
        Copy ``source`` into ``destination_dir``, then remove it.

        The source is only removed after the copy has completed. If removing it
        fails, the copy stays at the destination and the move still fails.

        Returns:
            Path of the moved file

        Raises:
            OperationFailedError: If the copy or the removal of the source fails
        """
        target = self.copy(source, destination_dir)
        try:
            self._storage.unlink(source)
        except Exception as e:
            self._logger.info(f"Copied to {target} but could not remove {source}: {e}")
            raise OperationFailedError(f"Failed to remove {source} after copy: {str(e)}")
        self._logger.info(f"Moved {source} to {target}")
        return target
