"""
Host information port interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CpuInfo:
    """One logical CPU."""

    model: str
    speed_mhz: float


class HostInfoPort(ABC):
    """Port interface for read-only queries about the host."""

    @abstractmethod
    def eol(self) -> str:
        """Return the platform line separator."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """Return one CpuInfo per logical CPU."""
        pass

    @abstractmethod
    def home_directory(self) -> str:
        """Return the current user's home directory."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Return the operating system account name."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """Return the CPU architecture."""
        pass
