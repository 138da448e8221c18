"""
Use case for computing a file's content hash.
"""

import logging
from typing import Optional

from file_manager.adapters.streams.digest_stage import DigestStage
from file_manager.exceptions import OperationFailedError
from file_manager.use_cases.streams.pipeline import StreamJob, StreamPipeline


class HashFileUseCase:
    """Use case for the SHA-256 digest of a file, computed incrementally."""

    def __init__(
        self,
        pipeline: StreamPipeline,
        algorithm: str = "sha256",
        logger: Optional[logging.Logger] = None,
    ):
        self._pipeline = pipeline
        self._algorithm = algorithm
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Hash a file.

        Args:
            path: Absolute path of the file

        Returns:
            Lowercase hexadecimal digest

        Raises:
            OperationFailedError: If the file cannot be fully read
        """
        try:
            self._logger.info(f"Hashing file: {path}")
            digest = DigestStage(self._algorithm)
            self._pipeline.run(StreamJob(source=path, stages=[digest]))
            return digest.hexdigest()
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error hashing file: {e}")
            raise OperationFailedError(f"Failed to hash {path}: {str(e)}")
