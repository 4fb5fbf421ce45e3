"""Local filesystem adapter for findtree.

Implements the FileSystemAdapter primitives on top of ``os``.
"""

import os
from typing import List

from ..core.adapter import FileSystemAdapter


class LocalFileSystemAdapter(FileSystemAdapter):
    """Adapter for the real, local filesystem.

    Listings are sorted by default so that traversal order (and therefore
    the order of results and of per-entry callbacks) is deterministic
    across platforms.
    """

    def __init__(self, sort_entries: bool = True):
        """Initialize filesystem adapter.

        Args:
            sort_entries: Whether directory listings are returned sorted
        """
        self.sort_entries = sort_entries

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def list_entries(self, path: str) -> List[str]:
        entries = os.listdir(path)
        if self.sort_entries:
            entries.sort()
        return entries

    def resolve_link(self, path: str) -> str:
        # strict=True raises ENOENT for a missing target and ELOOP for a cycle
        return os.path.realpath(path, strict=True)

    def __repr__(self) -> str:
        return f"LocalFileSystemAdapter(sort_entries={self.sort_entries})"
