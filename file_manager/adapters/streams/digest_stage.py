"""
Pass-through stage accumulating a cryptographic digest.
"""

import hashlib

from typing_extensions import override

from file_manager.ports.streams.stage_port import TransformStagePort


class DigestStage(TransformStagePort):
    """Feeds every chunk into a hashlib digest and passes it on unchanged."""

    def __init__(self, algorithm: str = "sha256"):
        self._hash = hashlib.new(algorithm)
        self._finished = False

    @override
    def process(self, chunk: bytes) -> bytes:
        self._hash.update(chunk)
        return chunk

    @override
    def finish(self) -> bytes:
        self._finished = True
        return b""

    def hexdigest(self) -> str:
        """Return the lowercase hex digest; only valid once the stream has drained."""
        if not self._finished:
            raise RuntimeError("Digest requested before the stream was fully consumed")
        return self._hash.hexdigest()
