"""file_manager package: an interactive file manager shell built on ports and adapters.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
