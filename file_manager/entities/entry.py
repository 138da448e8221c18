"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum

from file_manager.utils.text import display_text


class EntryKind(str, Enum):
    """Kind of a storage entry as shown to the user."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    """One row of a directory listing."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def get_details(self) -> dict[str, str]:
        """
        Get the entry as a table row.

        Returns:
            Dictionary with the entry name and type
        """
        return {"name": display_text(self.name), "type": self.kind.value}
