"""
Tests for the ListDirectoryUseCase.
"""

import os
from unittest.mock import MagicMock

import pytest

from file_manager.entities.entry import EntryKind
from file_manager.exceptions import OperationFailedError, StorageError
from file_manager.ports.storage.storage_port import StoragePort
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_directories_first_then_files(self, temp_directory, storage, mock_logger):
        entries = ListDirectoryUseCase(storage, mock_logger).execute(temp_directory)

        assert [(e.name, e.kind) for e in entries] == [
            ("empty", EntryKind.DIRECTORY),
            ("subdir", EntryKind.DIRECTORY),
            ("test1.txt", EntryKind.FILE),
            ("test2.py", EntryKind.FILE),
        ]
        mock_logger.info.assert_any_call(f"Listing directory: {temp_directory}")
        mock_logger.info.assert_any_call("Found 4 entries")

    def test_lexical_order_for_non_numeric_names(self, mock_logger):
        mock_storage = MagicMock(spec=StoragePort)
        names = ["b", "B", "10", "2", "a", "_x", "zeta", "Alpha"]
        dirs = {"zeta", "_x", "2"}
        mock_storage.list_dir.return_value = names

        def stat(path):
            if path == "/root/d" or os.path.basename(path) in dirs:
                return EntryKind.DIRECTORY
            return EntryKind.FILE

        mock_storage.stat.side_effect = stat
        entries = ListDirectoryUseCase(mock_storage, mock_logger).execute("/root/d")

        assert [e.name for e in entries] == ["2", "_x", "zeta", "10", "Alpha", "B", "a", "b"]
        kinds = [e.kind for e in entries]
        assert kinds == sorted(kinds, key=lambda k: k is EntryKind.FILE)

    def test_empty_directory(self, temp_directory, storage, mock_logger):
        entries = ListDirectoryUseCase(storage, mock_logger).execute(
            os.path.join(temp_directory, "empty")
        )
        assert entries == []

    def test_file_is_not_listable(self, temp_directory, storage, mock_logger):
        with pytest.raises(OperationFailedError, match="not a directory"):
            ListDirectoryUseCase(storage, mock_logger).execute(
                os.path.join(temp_directory, "test1.txt")
            )

    def test_missing_directory(self, temp_directory, storage, mock_logger):
        with pytest.raises(StorageError):
            ListDirectoryUseCase(storage, mock_logger).execute(
                os.path.join(temp_directory, "missing")
            )

    def test_unstatable_entry_listed_as_file(self, mock_logger):
        mock_storage = MagicMock(spec=StoragePort)
        mock_storage.list_dir.return_value = ["dangling"]

        def stat(path):
            if path == "/d":
                return EntryKind.DIRECTORY
            raise StorageError("broken link")

        mock_storage.stat.side_effect = stat
        entries = ListDirectoryUseCase(mock_storage, mock_logger).execute("/d")

        assert [(e.name, e.kind) for e in entries] == [("dangling", EntryKind.FILE)]
        mock_logger.info.assert_any_call("Could not stat dangling, listing it as a file: broken link")
        mock_logger.warning.assert_not_called()

    def test_unexpected_error(self, mock_logger):
        mock_storage = MagicMock(spec=StoragePort)
        mock_storage.stat.side_effect = Exception("Unexpected error")

        with pytest.raises(
            OperationFailedError, match="Failed to list /test/directory: Unexpected error"
        ):
            ListDirectoryUseCase(mock_storage, mock_logger).execute("/test/directory")
        mock_logger.error.assert_called_once_with("Error listing directory: Unexpected error")
