"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.adapters.storage.local_storage_adapter import LocalStorageAdapter
from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.use_cases.streams.pipeline import StreamPipeline


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        test1.txt, test2.py, subdir/test3.md, empty/

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        os.makedirs(os.path.join(temp_dir, "empty"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def storage(mock_logger):
    return LocalStorageAdapter(mock_logger)


@pytest.fixture
def pipeline(storage, mock_logger):
    """Pipeline with a tiny chunk size so multi-chunk paths are exercised."""
    return StreamPipeline(storage, chunk_size=7, logger=mock_logger)


@pytest.fixture
def cursor(temp_directory):
    return WorkingDirectoryCursor(temp_directory)


@pytest.fixture
def test_settings(monkeypatch):
    """Settings built from a clean environment."""
    for key in (
        "FILE_MANAGER_USERNAME",
        "FILE_MANAGER_CHUNK_SIZE",
        "FILE_MANAGER_BROTLI_QUALITY",
        "FILE_MANAGER_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "16")
    return Settings()


@pytest.fixture
def console_output():
    """A StringIO the test console writes into."""
    return io.StringIO()


@pytest.fixture
def dependency_container(mock_logger, test_settings, temp_directory, console_output):
    """
    Create a dependency container wired to a temp directory and a captured console.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(test_settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    container.override(
        "console",
        Console(file=console_output, width=200, force_terminal=False, color_system=None),
    )
    container.override("cursor", WorkingDirectoryCursor(temp_directory))
    return container
