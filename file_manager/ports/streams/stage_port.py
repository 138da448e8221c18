"""
Port for transform stages plugged into a stream pipeline (codecs, digests).
"""

from abc import ABC, abstractmethod


class TransformStagePort(ABC):
    """
    Port interface for one incremental transform stage.

    A stage receives chunks in arrival order and returns whatever output it is
    ready to emit (possibly empty). ``finish`` is called exactly once after the
    last chunk and returns any buffered tail.
    """

    @abstractmethod
    def process(self, chunk: bytes) -> bytes:
        """
        Feed one chunk through the stage.

        Args:
            chunk: Next input bytes

        Returns:
            Output bytes ready to be passed downstream
        """
        pass

    @abstractmethod
    def finish(self) -> bytes:
        """
        Flush the stage after the last chunk.

        Returns:
            Remaining output bytes

        Raises:
            Exception: If the input was incomplete or invalid
        """
        pass
