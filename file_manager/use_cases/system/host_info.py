"""
Use case answering the ``os`` command flags.
"""

import json
import logging
from typing import Optional

from file_manager.exceptions import InvalidInputError, OperationFailedError
from file_manager.ports.system.host_info_port import CpuInfo, HostInfoPort

HOST_INFO_FLAGS = ("--EOL", "--cpus", "--homedir", "--username", "--architecture")


class HostInfoUseCase:
    """Pure host queries; no mutation and no streaming."""

    def __init__(
        self,
        host_info: HostInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._host_info = host_info
        self._logger = logger or logging.getLogger(__name__)

    def eol(self) -> str:
        """Return the line separator JSON-quoted, e.g. ``"\\n"``."""
        return json.dumps(self._host_info.eol())

    def cpus(self) -> list[CpuInfo]:
        return self._host_info.cpus()

    def query(self, flag: str) -> str | list[CpuInfo]:
        """
        Answer one flag.

        Args:
            flag: One of HOST_INFO_FLAGS

        Returns:
            A printable string, or the CPU list for ``--cpus``

        Raises:
            InvalidInputError: If the flag is not recognized
            OperationFailedError: If the host cannot be queried
        """
        if flag not in HOST_INFO_FLAGS:
            raise InvalidInputError(f"Unknown os flag: {flag}")
        self._logger.info(f"Host query: {flag}")
        try:
            if flag == "--EOL":
                return self.eol()
            if flag == "--cpus":
                return self.cpus()
            if flag == "--homedir":
                return self._host_info.home_directory()
            if flag == "--username":
                return self._host_info.username()
            return self._host_info.architecture()
        except Exception as e:
            self._logger.error(f"Host query {flag} failed: {e}")
            raise OperationFailedError(f"Host query {flag} failed: {str(e)}")
