"""Async filesystem adapter abstraction.

Wraps a synchronous FileSystemAdapter. Directory listing and link
resolution are the suspension points of an async traversal and run in
a worker thread; the cheap ``lstat``-based predicates stay synchronous.
"""

import asyncio
from typing import List, Optional

from ...sync.adapters.filesystem import LocalFileSystemAdapter
from ...sync.core.adapter import FileSystemAdapter


class AsyncFileSystemAdapter:
    """Async facade over a synchronous filesystem adapter.

    Subclasses talking to a natively async backend can override
    ``list_entries`` and ``resolve_link`` directly.
    """

    def __init__(self, base_adapter: Optional[FileSystemAdapter] = None):
        """Initialize adapter.

        Args:
            base_adapter: Adapter doing the actual I/O (defaults to the
                local filesystem)
        """
        self._base_adapter = base_adapter or LocalFileSystemAdapter()

    @property
    def base_adapter(self) -> FileSystemAdapter:
        return self._base_adapter

    def exists(self, path: str) -> bool:
        return self._base_adapter.exists(path)

    def absolute(self, path: str) -> str:
        return self._base_adapter.absolute(path)

    def is_file(self, path: str) -> bool:
        return self._base_adapter.is_file(path)

    def is_directory(self, path: str) -> bool:
        return self._base_adapter.is_directory(path)

    def is_symlink(self, path: str) -> bool:
        return self._base_adapter.is_symlink(path)

    async def list_entries(self, path: str) -> List[str]:
        """List the base names of a directory's entries without blocking the loop."""
        return await asyncio.to_thread(self._base_adapter.list_entries, path)

    async def resolve_link(self, path: str) -> str:
        """Resolve a symbolic link without blocking the loop.

        Raises:
            OSError: with errno ENOENT or ELOOP when the link is broken
        """
        return await asyncio.to_thread(self._base_adapter.resolve_link, path)

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter({self._base_adapter!r})"
