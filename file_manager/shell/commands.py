"""
Command handlers: resolve arguments against the cursor, call use cases, render results.
"""

import codecs
import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.ports.system.host_info_port import CpuInfo
from file_manager.shell.command_table import CommandSpec, CommandTable
from file_manager.use_cases.files.compress_files import CompressFilesUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.manage_files import ManageFilesUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.transfer_files import TransferFilesUseCase
from file_manager.use_cases.navigation.navigate import NavigateUseCase
from file_manager.use_cases.system.host_info import HostInfoUseCase
from file_manager.utils.text import display_text

EMPTY_DIRECTORY = "Empty directory"


class ShellCommands:
    """One method per command; failures propagate to the dispatcher as exceptions."""

    def __init__(
        self,
        console: Console,
        navigate: NavigateUseCase,
        list_directory: ListDirectoryUseCase,
        read_file: ReadFileUseCase,
        manage_files: ManageFilesUseCase,
        transfer_files: TransferFilesUseCase,
        hash_file: HashFileUseCase,
        compress_files: CompressFilesUseCase,
        host_info: HostInfoUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console
        self._navigate = navigate
        self._list_directory = list_directory
        self._read_file = read_file
        self._manage_files = manage_files
        self._transfer_files = transfer_files
        self._hash_file = hash_file
        self._compress_files = compress_files
        self._host_info = host_info
        self._logger = logger or logging.getLogger(__name__)

    def _say(self, text: str) -> None:
        self._console.print(display_text(text), markup=False, highlight=False, soft_wrap=True)

    # ------------------------- navigation -------------------------
    def up(self, cursor: WorkingDirectoryCursor) -> None:
        self._navigate.up(cursor)

    def cd(self, cursor: WorkingDirectoryCursor, directory: str) -> None:
        self._navigate.cd(cursor, directory)

    # ------------------------- files -------------------------
    def ls(self, cursor: WorkingDirectoryCursor, subpath: str = ".") -> None:
        entries = self._list_directory.execute(cursor.resolve(subpath))
        if not entries:
            self._say(EMPTY_DIRECTORY)
            return
        tbl = Table(box=box.SIMPLE_HEAVY)
        tbl.add_column("(index)", justify="right")
        tbl.add_column("Name", no_wrap=True)
        tbl.add_column("Type")
        for index, entry in enumerate(entries):
            details = entry.get_details()
            tbl.add_row(str(index), Text(details["name"]), details["type"])
        self._console.print(tbl)

    def cat(self, cursor: WorkingDirectoryCursor, path: str) -> None:
        out = self._console.file
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        last = "\n"

        def write(chunk: bytes) -> None:
            nonlocal last
            text = decoder.decode(chunk)
            if text:
                out.write(text)
                last = text[-1]

        try:
            self._read_file.execute(cursor.resolve(path), write)
            tail = decoder.decode(b"", final=True)
            if tail:
                out.write(tail)
                last = tail[-1]
        finally:
            if last != "\n":
                out.write("\n")
            out.flush()

    def add(self, cursor: WorkingDirectoryCursor, name: str) -> None:
        self._manage_files.create(cursor.resolve(name))

    def rn(self, cursor: WorkingDirectoryCursor, old_path: str, new_name: str) -> None:
        self._manage_files.rename(cursor.resolve(old_path), cursor.resolve(new_name))

    def rm(self, cursor: WorkingDirectoryCursor, path: str) -> None:
        self._manage_files.remove(cursor.resolve(path))

    def cp(self, cursor: WorkingDirectoryCursor, source: str, destination: str) -> None:
        self._transfer_files.copy(cursor.resolve(source), cursor.resolve(destination))

    def mv(self, cursor: WorkingDirectoryCursor, source: str, destination: str) -> None:
        self._transfer_files.move(cursor.resolve(source), cursor.resolve(destination))

    def hash(self, cursor: WorkingDirectoryCursor, path: str) -> None:
        self._say(self._hash_file.execute(cursor.resolve(path)))

    def compress(self, cursor: WorkingDirectoryCursor, source: str, destination: str) -> None:
        self._compress_files.compress(cursor.resolve(source), cursor.resolve(destination))

    def decompress(self, cursor: WorkingDirectoryCursor, source: str, destination: str) -> None:
        self._compress_files.decompress(cursor.resolve(source), cursor.resolve(destination))

    # ------------------------- system -------------------------
    def os(self, cursor: WorkingDirectoryCursor, flag: str) -> None:
        answer = self._host_info.query(flag)
        if isinstance(answer, str):
            self._say(answer)
        else:
            self._print_cpus(answer)

    def _print_cpus(self, cpus: list[CpuInfo]) -> None:
        self._say(f"Total CPUs: {len(cpus)}")
        tbl = Table(box=box.SIMPLE_HEAVY)
        tbl.add_column("(index)", justify="right")
        tbl.add_column("Model")
        tbl.add_column("Speed")
        for index, cpu in enumerate(cpus):
            tbl.add_row(str(index), Text(cpu.model), f"{cpu.speed_mhz / 1000:.1f} GHz")
        self._console.print(tbl)


def build_command_table(commands: ShellCommands) -> CommandTable:
    """Register every shell command with its argument roles."""
    return CommandTable(
        [
            CommandSpec("up", commands.up),
            CommandSpec("cd", commands.cd, ("directory",)),
            CommandSpec("ls", commands.ls, (), ("subpath",)),
            CommandSpec("cat", commands.cat, ("path",)),
            CommandSpec("add", commands.add, ("name",)),
            CommandSpec("rn", commands.rn, ("old_path", "new_name")),
            CommandSpec("cp", commands.cp, ("source", "destination_dir")),
            CommandSpec("mv", commands.mv, ("source", "destination_dir")),
            CommandSpec("rm", commands.rm, ("path",)),
            CommandSpec("os", commands.os, ("flag",)),
            CommandSpec("hash", commands.hash, ("path",)),
            CommandSpec("compress", commands.compress, ("source", "destination")),
            CommandSpec("decompress", commands.decompress, ("source", "destination")),
        ]
    )
