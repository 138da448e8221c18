"""
Use case for streaming a file's content to a caller supplied writer.
"""

import logging
from typing import Callable, Optional

from file_manager.exceptions import OperationFailedError
from file_manager.use_cases.streams.pipeline import StreamJob, StreamPipeline


class ReadFileUseCase:
    """Use case for reading a file chunk by chunk, in order."""

    def __init__(
        self,
        pipeline: StreamPipeline,
        logger: Optional[logging.Logger] = None,
    ):
        self._pipeline = pipeline
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, on_chunk: Callable[[bytes], None]) -> None:
        """
        Stream a file.

        Args:
            path: Absolute path of the file to read
            on_chunk: Called with every chunk as it arrives

        Raises:
            OperationFailedError: If opening or reading fails
        """
        try:
            self._logger.info(f"Reading file: {path}")
            self._pipeline.run(StreamJob(source=path, on_chunk=on_chunk))
        except OperationFailedError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise OperationFailedError(f"Failed to read {path}: {str(e)}")
