"""
Brotli compression and decompression stages.
"""

import brotli
from typing_extensions import override

from file_manager.exceptions import CodecError
from file_manager.ports.streams.stage_port import TransformStagePort


class BrotliCompressStage(TransformStagePort):
    """Incremental Brotli compressor."""

    def __init__(self, quality: int = 11):
        self._compressor = brotli.Compressor(quality=quality)

    @override
    def process(self, chunk: bytes) -> bytes:
        try:
            return self._compressor.process(chunk)
        except brotli.error as e:
            raise CodecError(f"Brotli compression failed: {e}") from e

    @override
    def finish(self) -> bytes:
        try:
            return self._compressor.finish()
        except brotli.error as e:
            raise CodecError(f"Brotli compression failed: {e}") from e


class BrotliDecompressStage(TransformStagePort):
    """Incremental Brotli decompressor; rejects truncated input on finish."""

    def __init__(self):
        self._decompressor = brotli.Decompressor()

    @override
    def process(self, chunk: bytes) -> bytes:
        try:
            return self._decompressor.process(chunk)
        except brotli.error as e:
            raise CodecError(f"Invalid Brotli data: {e}") from e

    @override
    def finish(self) -> bytes:
        if not self._decompressor.is_finished():
            raise CodecError("Brotli stream is truncated")
        return b""
