"""
Use cases for Brotli compression and decompression of a file.
"""

import logging
from typing import Optional

from file_manager.adapters.streams.brotli_stages import (
    BrotliCompressStage,
    BrotliDecompressStage,
)
from file_manager.exceptions import OperationFailedError
from file_manager.ports.storage.storage_port import StoragePort
from file_manager.ports.streams.stage_port import TransformStagePort
from file_manager.use_cases.streams.pipeline import StreamJob, StreamPipeline


class CompressFilesUseCase:
    """Use case for ``compress`` and ``decompress``: source -> codec -> destination."""

    def __init__(
        self,
        storage: StoragePort,
        pipeline: StreamPipeline,
        quality: int = 11,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage: Storage used to detect a destination aliasing the source
            pipeline: Pipeline streaming the bytes
            quality: Brotli quality (0-11)
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._pipeline = pipeline
        self._quality = quality
        self._logger = logger or logging.getLogger(__name__)

    def _run(self, action: str, source: str, destination: str, stage: TransformStagePort) -> None:
        try:
            self._logger.info(f"{action}: {source} -> {destination}")
            if self._storage.exists(destination) and self._storage.same_file(source, destination):
                raise OperationFailedError(f"Source and destination are the same file: {source}")
            self._pipeline.run(
                StreamJob(source=source, destination=destination, stages=[stage])
            )
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error during {action.lower()}: {e}")
            raise OperationFailedError(f"{action} of {source} failed: {str(e)}")

    def compress(self, source: str, destination: str) -> None:
        """
        Compress ``source`` into ``destination`` (overwritten if present).

        Raises:
            OperationFailedError: If any stage fails
        """
        self._run("Compress", source, destination, BrotliCompressStage(self._quality))

    def decompress(self, source: str, destination: str) -> None:
        """
        Decompress ``source`` into ``destination`` (overwritten if present).

        Raises:
            OperationFailedError: If any stage fails, including truncated or corrupt input
        """
        self._run("Decompress", source, destination, BrotliDecompressStage())
