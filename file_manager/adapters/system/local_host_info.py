"""
Host information adapter built on the standard library.
"""

import getpass
import logging
import os
import platform
from typing import Optional

from typing_extensions import override

from file_manager.ports.system.host_info_port import CpuInfo, HostInfoPort

_CPUINFO_PATH = "/proc/cpuinfo"


class LocalHostInfoAdapter(HostInfoPort):
    """Answers host queries for the machine the shell runs on."""

    def __init__(
        self,
        cpuinfo_path: str = _CPUINFO_PATH,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cpuinfo_path = cpuinfo_path
        self._logger = logger or logging.getLogger(__name__)

    @override
    def eol(self) -> str:
        return os.linesep

    def _read_cpuinfo(self) -> list[CpuInfo]:
        cpus: list[CpuInfo] = []
        model = ""
        speed = 0.0
        with open(self._cpuinfo_path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                key, _, value = line.partition(":")
                key = key.strip()
                value = value.strip()
                if key == "processor" and model:
                    cpus.append(CpuInfo(model=model, speed_mhz=speed))
                    model, speed = "", 0.0
                elif key == "model name":
                    model = value
                elif key == "cpu MHz":
                    try:
                        speed = float(value)
                    except ValueError:
                        speed = 0.0
        if model:
            cpus.append(CpuInfo(model=model, speed_mhz=speed))
        return cpus

    @override
    def cpus(self) -> list[CpuInfo]:
        if os.path.exists(self._cpuinfo_path):
            try:
                cpus = self._read_cpuinfo()
                if cpus:
                    return cpus
            except OSError as e:
                self._logger.warning(f"Could not read {self._cpuinfo_path}: {e}")
        model = platform.processor() or platform.machine() or "unknown"
        return [CpuInfo(model=model, speed_mhz=0.0) for _ in range(os.cpu_count() or 1)]

    @override
    def home_directory(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()
