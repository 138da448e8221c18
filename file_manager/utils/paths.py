"""Lexical path helpers.

Nothing in this module touches storage: results are computed from strings only.
"""

from __future__ import annotations

import os


def resolve_path(base: str, raw: str) -> str:
    """Resolve ``raw`` against the absolute directory ``base``.

    Absolute ``raw`` values override ``base``; ``.`` and ``..`` segments are collapsed.
    """
    return os.path.normpath(os.path.join(base, raw))


def parent_of(path: str) -> str:
    """Return the parent directory of ``path`` (the root is its own parent)."""
    return os.path.dirname(os.path.normpath(path)) or path


def is_root(path: str) -> bool:
    return parent_of(path) == os.path.normpath(path)
