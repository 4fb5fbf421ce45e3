"""Async traversal engine.

Walks a directory tree depth-first and streams the paths of the entries
of the requested type as an AsyncIterator.

Ordering is strict: entries of one directory are handled in listing
order, and an entry's whole subtree is finished before its next sibling
is started. Siblings are never processed concurrently.
"""

import asyncio
import os
from typing import AsyncIterator, Optional, Union

from ..._common.config import DEFAULT_LINK_DEPTH, TargetType
from ..._common.error_handling import ErrorHandlingAdapter
from ..._common.error_policies import ErrorPolicy, FailFastPolicy
from ..._common.errors import NotExistError
from ...sync.core.adapter import FileSystemAdapter
from .adapter import AsyncFileSystemAdapter
from .resolver import AsyncSymlinkResolver


class AsyncFindTraverser:
    """Async depth-first, pre-order traversal of a directory tree.

    Unlike the sync traverser, a missing directory does not abort the walk:
    ``NotExistError`` is handed to the error policy, and if the policy
    absorbs it the walk carries on with the next sibling.
    """

    def __init__(
        self,
        adapter: Union[AsyncFileSystemAdapter, FileSystemAdapter, None] = None,
        policy: Optional[ErrorPolicy] = None,
        max_link_depth: int = DEFAULT_LINK_DEPTH
    ):
        """Initialize traverser.

        Args:
            adapter: Async adapter, or a sync adapter to wrap
            policy: Error policy for I/O failures (defaults to fail fast)
            max_link_depth: Indirection bound for symbolic links
        """
        self.policy = policy or FailFastPolicy()
        if not isinstance(adapter, (AsyncFileSystemAdapter, ErrorHandlingAdapter)):
            adapter = AsyncFileSystemAdapter(adapter)
        if not isinstance(adapter, ErrorHandlingAdapter):
            adapter = ErrorHandlingAdapter(adapter, self.policy)
        self.adapter = adapter
        self.resolver = AsyncSymlinkResolver(adapter, max_link_depth)

    async def traverse(
        self,
        root: str,
        target: Union[TargetType, str] = TargetType.FILE
    ) -> AsyncIterator[str]:
        """Walk ``root`` and stream matching entry paths.

        Args:
            root: Directory to walk (a link to a directory is followed)
            target: Kind of entry to yield

        Yields:
            Paths joined onto ``root`` as given, in depth-first order
        """
        target = TargetType.parse(target)
        async for path in self._walk(os.fspath(root), target):
            yield path

    async def _walk(self, root: str, target: TargetType) -> AsyncIterator[str]:
        if not self.adapter.exists(root):
            self.policy.handle(NotExistError(root), 'traverse', root)
            return

        listing_root = root
        is_link = self.adapter.is_symlink(root)
        if is_link is None:
            return
        if is_link:
            listing_root = await self.resolver.resolve(root)
            if listing_root is None:
                return

        if not self.adapter.is_directory(listing_root):
            return

        entries = await self.adapter.list_entries(listing_root)
        for name in entries:
            async for path in self._visit(os.path.join(root, name), target):
                yield path
            # Give other tasks a turn between siblings
            await asyncio.sleep(0)

    async def _visit(self, path: str, target: TargetType) -> AsyncIterator[str]:
        is_dir = self.adapter.is_directory(path)
        if is_dir is None:
            return
        if is_dir:
            if target is TargetType.DIRECTORY:
                yield path
            async for child in self._walk(path, target):
                yield child
            return

        is_link = self.adapter.is_symlink(path)
        if is_link is None:
            return
        if is_link:
            origin = await self.resolver.resolve(path)
            if origin is not None and self.adapter.exists(origin):
                is_dir = self.adapter.is_directory(origin)
                if is_dir is None:
                    return
                if is_dir:
                    # Linked directory: reported, not descended
                    if target is TargetType.DIRECTORY:
                        yield path
                    return

        if target is TargetType.FILE:
            yield path
