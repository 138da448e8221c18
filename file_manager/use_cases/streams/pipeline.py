"""
Stream pipeline: source file -> transform stages -> sink, run to a single outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional

from file_manager.exceptions import OperationFailedError, StreamPipelineError
from file_manager.ports.storage.storage_port import StoragePort
from file_manager.ports.streams.stage_port import TransformStagePort


@dataclass
class StreamJob:
    """One streaming command invocation.

    ``destination`` is a file the final output is written to; ``on_chunk``
    receives the final output instead (or as well). With neither, the output
    is dropped, which is what a digest-only job wants.
    """

    source: str
    destination: Optional[str] = None
    stages: list[TransformStagePort] = field(default_factory=list)
    on_chunk: Optional[Callable[[bytes], None]] = None
    discard_partial_output: bool = True


class StreamPipeline:
    """Runs StreamJobs chunk by chunk without loading whole files into memory."""

    def __init__(
        self,
        storage: StoragePort,
        chunk_size: int = 64 * 1024,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            storage: Storage used to open the source and destination
            chunk_size: Bytes read from the source per iteration
            logger: Logger instance to use for logging
        """
        self._storage = storage
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def run(self, job: StreamJob) -> None:
        """
        Run the job to completion.

        Returns only once the sink has been flushed and closed.

        Raises:
            StreamPipelineError: If opening, reading, any stage, or writing fails
        """
        sink: BinaryIO | None = None
        created = False
        try:
            with self._storage.open_read(job.source) as reader:
                if job.destination is not None:
                    sink = self._storage.open_write(job.destination)
                    created = True

                def emit(data: bytes) -> None:
                    if not data:
                        return
                    if sink is not None:
                        sink.write(data)
                    if job.on_chunk is not None:
                        job.on_chunk(data)

                while True:
                    chunk = reader.read(self._chunk_size)
                    if not chunk:
                        break
                    emit(self._push(job.stages, chunk))

                for index, stage in enumerate(job.stages):
                    emit(self._push(job.stages[index + 1 :], stage.finish()))

                if sink is not None:
                    sink.flush()
                    sink.close()
                    sink = None
        except Exception as e:
            if isinstance(e, (OperationFailedError, OSError)):
                # Storage and codec failures are reported to the user as Operation failed
                self._logger.info(f"Stream from {job.source} failed: {e}")
            else:
                self._logger.error(f"Stream from {job.source} failed: {e}")
            if sink is not None:
                self._close_quietly(sink)
                sink = None
            if created and job.discard_partial_output:
                self._discard(job.destination)
            raise StreamPipelineError(f"Stream from {job.source} failed: {e}") from e
        finally:
            if sink is not None:
                # Interrupted by a BaseException; no cleanup of partial output
                self._close_quietly(sink)
        self._logger.info(f"Stream from {job.source} completed")

    def _push(self, stages: list[TransformStagePort], chunk: bytes) -> bytes:
        for stage in stages:
            if not chunk:
                break
            chunk = stage.process(chunk)
        return chunk

    def _close_quietly(self, sink: BinaryIO) -> None:
        try:
            sink.close()
        except Exception as e:
            self._logger.warning(f"Could not close sink: {e}")

    def _discard(self, path: Optional[str]) -> None:
        if path is None:
            return
        try:
            self._storage.unlink(path)
        except Exception as e:
            self._logger.warning(f"Could not remove partial output {path}: {e}")
