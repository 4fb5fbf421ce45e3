"""Bounded symbolic link resolution, async variant.

Same resolution rules as ``findtree.sync.core.resolver.SymlinkResolver``;
the only difference is that each indirection is awaited.
"""

from typing import Optional

from ..._common.config import DEFAULT_LINK_DEPTH
from ..._common.errors import is_broken_link
from .adapter import AsyncFileSystemAdapter


class AsyncSymlinkResolver:
    """Resolves a path through a bounded number of link indirections."""

    def __init__(self, adapter: AsyncFileSystemAdapter, max_depth: int = DEFAULT_LINK_DEPTH):
        self.adapter = adapter
        self.max_depth = max_depth

    async def resolve(self, path: str, depth: Optional[int] = None) -> Optional[str]:
        """Resolve ``path`` to a concrete path.

        Returns:
            The absolute concrete path, ``path`` itself for a broken link,
            or None when the depth is exhausted or the classification failed
        """
        if depth is None:
            depth = self.max_depth

        if depth < self.max_depth and not self.adapter.exists(path):
            return self.adapter.absolute(path)

        is_link = self.adapter.is_symlink(path)
        if is_link is None:
            return None
        if not is_link:
            return self.adapter.absolute(path)
        if depth <= 0:
            return None

        try:
            target = await self.adapter.resolve_link(path)
        except OSError as e:
            if is_broken_link(e):
                return path
            raise

        if target is None:
            return None
        return await self.resolve(target, depth - 1)
