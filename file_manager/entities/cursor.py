"""
Working directory cursor entity.
"""

import os

from file_manager.utils.paths import is_root, parent_of, resolve_path


class WorkingDirectoryCursor:
    """
    The single current directory every relative command resolves against.

    Only navigation use cases call ``move_to``; everything else reads ``path``
    or calls ``resolve``.
    """

    def __init__(self, initial_path: str):
        """
        Initialize the cursor.

        Args:
            initial_path: Starting directory, trusted without a storage check
        """
        self._path = os.path.normpath(os.path.abspath(initial_path))

    @property
    def path(self) -> str:
        return self._path

    def resolve(self, raw: str) -> str:
        """Resolve a user supplied path against the cursor."""
        return resolve_path(self._path, raw)

    def parent(self) -> str:
        return parent_of(self._path)

    def at_root(self) -> bool:
        return is_root(self._path)

    def move_to(self, path: str) -> None:
        """Replace the cursor value; the caller has verified ``path`` is a directory."""
        self._path = os.path.normpath(path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"WorkingDirectoryCursor(path='{self._path}')"
