"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Callable, Optional

from rich.console import Console

from file_manager.adapters.storage.local_storage_adapter import LocalStorageAdapter
from file_manager.adapters.system.local_host_info import LocalHostInfoAdapter
from file_manager.config.settings import Settings
from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.ports.storage.storage_port import StoragePort
from file_manager.ports.system.host_info_port import HostInfoPort
from file_manager.shell.command_table import CommandTable
from file_manager.shell.commands import ShellCommands, build_command_table
from file_manager.shell.dispatcher import Dispatcher
from file_manager.use_cases.files.compress_files import CompressFilesUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.manage_files import ManageFilesUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.transfer_files import TransferFilesUseCase
from file_manager.use_cases.navigation.navigate import NavigateUseCase
from file_manager.use_cases.streams.pipeline import StreamPipeline
from file_manager.use_cases.system.host_info import HostInfoUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, loading them from the environment on first use.

        Raises:
            ConfigurationError: If the environment holds invalid values
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> Console:
        if "console" not in self._instances:
            self._instances["console"] = Console(highlight=False)
        return self._instances["console"]

    def get_storage(self) -> StoragePort:
        """
        Get storage adapter instance.

        Returns:
            StoragePort implementation
        """
        if "storage" not in self._instances:
            self._instances["storage"] = LocalStorageAdapter(self._logger)
        return self._instances["storage"]

    def get_host_info(self) -> HostInfoPort:
        """
        Get host information adapter instance.

        Returns:
            HostInfoPort implementation
        """
        if "host_info" not in self._instances:
            self._instances["host_info"] = LocalHostInfoAdapter(logger=self._logger)
        return self._instances["host_info"]

    def get_stream_pipeline(self) -> StreamPipeline:
        if "stream_pipeline" not in self._instances:
            self._instances["stream_pipeline"] = StreamPipeline(
                self.get_storage(), self.get_settings().chunk_size, self._logger
            )
        return self._instances["stream_pipeline"]

    def get_cursor(self) -> WorkingDirectoryCursor:
        """
        Get the working directory cursor, starting at the user's home directory.
        """
        if "cursor" not in self._instances:
            self._instances["cursor"] = WorkingDirectoryCursor(
                self.get_host_info().home_directory()
            )
        return self._instances["cursor"]

    def get_shell_commands(self) -> ShellCommands:
        """
        Get the command handlers with every use case injected.
        """
        if "shell_commands" not in self._instances:
            storage = self.get_storage()
            pipeline = self.get_stream_pipeline()
            self._instances["shell_commands"] = ShellCommands(
                console=self.get_console(),
                navigate=NavigateUseCase(storage, self._logger),
                list_directory=ListDirectoryUseCase(storage, self._logger),
                read_file=ReadFileUseCase(pipeline, self._logger),
                manage_files=ManageFilesUseCase(storage, self._logger),
                transfer_files=TransferFilesUseCase(storage, pipeline, self._logger),
                hash_file=HashFileUseCase(pipeline, logger=self._logger),
                compress_files=CompressFilesUseCase(
                    storage, pipeline, self.get_settings().brotli_quality, self._logger
                ),
                host_info=HostInfoUseCase(self.get_host_info(), self._logger),
                logger=self._logger,
            )
        return self._instances["shell_commands"]

    def get_command_table(self) -> CommandTable:
        if "command_table" not in self._instances:
            self._instances["command_table"] = build_command_table(
                self.get_shell_commands()
            )
        return self._instances["command_table"]

    def get_dispatcher(
        self,
        username: Optional[str] = None,
        read_line: Optional[Callable[[], str]] = None,
    ) -> Dispatcher:
        """
        Get the REPL dispatcher.

        Args:
            username: Display name for the banners (default: configured username)
            read_line: Line source (default: input)
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = Dispatcher(
                self.get_command_table(),
                self.get_cursor(),
                self.get_console(),
                username=username or self.get_settings().username,
                read_line=read_line,
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def override(self, name: str, instance: object) -> None:
        """Register an instance ahead of time (useful for testing)."""
        self._instances[name] = instance

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
