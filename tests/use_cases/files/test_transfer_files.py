"""
Tests for the TransferFilesUseCase.
"""

import os
from unittest.mock import patch

import pytest

from file_manager.exceptions import OperationFailedError, StorageError, StreamPipelineError
from file_manager.use_cases.files.transfer_files import TransferFilesUseCase


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class TestCopy:
    """Test cases for cp."""

    def test_copy_into_directory(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test1.txt")
        target = TransferFilesUseCase(storage, pipeline, mock_logger).copy(
            source, os.path.join(temp_directory, "subdir")
        )
        assert target == os.path.join(temp_directory, "subdir", "test1.txt")
        assert _read(target) == _read(source)
        assert os.path.exists(source)

    def test_copy_directory_source_fails(self, temp_directory, storage, pipeline, mock_logger):
        dest = os.path.join(temp_directory, "empty")
        with pytest.raises(OperationFailedError, match="Source is a directory"):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(
                os.path.join(temp_directory, "subdir"), dest
            )
        assert os.listdir(dest) == []

    def test_copy_to_file_destination_fails(self, temp_directory, storage, pipeline, mock_logger):
        with pytest.raises(OperationFailedError, match="Destination is not a directory"):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(
                os.path.join(temp_directory, "test1.txt"),
                os.path.join(temp_directory, "test2.py"),
            )
        assert _read(os.path.join(temp_directory, "test2.py")) == b"print('Hello, world!')"

    def test_copy_missing_destination_fails(self, temp_directory, storage, pipeline, mock_logger):
        with pytest.raises(OperationFailedError):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(
                os.path.join(temp_directory, "test1.txt"),
                os.path.join(temp_directory, "nowhere"),
            )
        assert not os.path.exists(os.path.join(temp_directory, "nowhere"))

    def test_copy_into_own_directory_fails(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test1.txt")
        with pytest.raises(OperationFailedError, match="same file"):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(source, temp_directory)
        assert _read(source) == b"This is a test file."


class TestMove:
    """Test cases for mv."""

    def test_move(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test2.py")
        original = _read(source)
        target = TransferFilesUseCase(storage, pipeline, mock_logger).move(
            source, os.path.join(temp_directory, "empty")
        )
        assert not os.path.exists(source)
        assert target == os.path.join(temp_directory, "empty", "test2.py")
        assert _read(target) == original

    def test_failed_copy_keeps_source(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test2.py")
        with patch.object(pipeline, "run", side_effect=StreamPipelineError("injected")):
            with pytest.raises(OperationFailedError, match="injected"):
                TransferFilesUseCase(storage, pipeline, mock_logger).move(
                    source, os.path.join(temp_directory, "empty")
                )
        assert _read(source) == b"print('Hello, world!')"

    def test_failed_unlink_leaves_duplicate(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test2.py")
        dest = os.path.join(temp_directory, "empty")
        with patch.object(storage, "unlink", side_effect=StorageError("read-only")):
            with pytest.raises(OperationFailedError, match="after copy"):
                TransferFilesUseCase(storage, pipeline, mock_logger).move(source, dest)
        assert os.path.exists(source)
        assert _read(os.path.join(dest, "test2.py")) == _read(source)
        mock_logger.error.assert_not_called()

    def test_move_directory_fails(self, temp_directory, storage, pipeline, mock_logger):
        with pytest.raises(OperationFailedError):
            TransferFilesUseCase(storage, pipeline, mock_logger).move(
                os.path.join(temp_directory, "subdir"), os.path.join(temp_directory, "empty")
            )
        assert os.path.isdir(os.path.join(temp_directory, "subdir"))


class TestAliasedDestination:
    """cp and mv into a directory that reaches the source under another path."""

    @pytest.fixture
    def alias(self, temp_directory):
        path = os.path.join(temp_directory, "empty", "alias")
        os.symlink(temp_directory, path)
        return path

    def test_copy_through_symlinked_directory_fails(
        self, temp_directory, alias, storage, pipeline, mock_logger
    ):
        source = os.path.join(temp_directory, "test1.txt")
        with pytest.raises(OperationFailedError, match="same file"):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(source, alias)
        assert _read(source) == b"This is a test file."

    def test_move_through_symlinked_directory_keeps_source(
        self, temp_directory, alias, storage, pipeline, mock_logger
    ):
        source = os.path.join(temp_directory, "test2.py")
        with pytest.raises(OperationFailedError, match="same file"):
            TransferFilesUseCase(storage, pipeline, mock_logger).move(source, alias)
        assert _read(source) == b"print('Hello, world!')"

    def test_copy_onto_hard_link_fails(self, temp_directory, storage, pipeline, mock_logger):
        source = os.path.join(temp_directory, "test1.txt")
        os.link(source, os.path.join(temp_directory, "subdir", "test1.txt"))
        with pytest.raises(OperationFailedError, match="same file"):
            TransferFilesUseCase(storage, pipeline, mock_logger).copy(
                source, os.path.join(temp_directory, "subdir")
            )
        assert _read(source) == b"This is a test file."

    def test_copy_over_unrelated_file_is_allowed(
        self, temp_directory, storage, pipeline, mock_logger
    ):
        other = os.path.join(temp_directory, "subdir", "test1.txt")
        with open(other, "wb") as f:
            f.write(b"old")
        TransferFilesUseCase(storage, pipeline, mock_logger).copy(
            os.path.join(temp_directory, "test1.txt"), os.path.join(temp_directory, "subdir")
        )
        assert _read(other) == b"This is a test file."
