"""Bounded symbolic link resolution.

Links are followed at most ``max_depth`` times. There is no visited set:
the depth bound alone guarantees termination, at the price of reporting
very long (but legitimate) chains as unresolved.
"""

from typing import Optional

from ..._common.config import DEFAULT_LINK_DEPTH
from ..._common.errors import is_broken_link
from .adapter import FileSystemAdapter


class SymlinkResolver:
    """Resolves a path through a bounded number of link indirections."""

    def __init__(self, adapter: FileSystemAdapter, max_depth: int = DEFAULT_LINK_DEPTH):
        """Initialize resolver.

        Args:
            adapter: Filesystem adapter (usually wrapped for error handling)
            max_depth: Maximum number of indirections to follow
        """
        self.adapter = adapter
        self.max_depth = max_depth

    def resolve(self, path: str, depth: Optional[int] = None) -> Optional[str]:
        """Resolve ``path`` to a concrete path.

        Args:
            path: Path to resolve, usually a symbolic link
            depth: Remaining indirections (defaults to ``max_depth``)

        Returns:
            The absolute concrete path; the original ``path`` unchanged if the
            link is broken (callers test existence to detect that); or None
            when the depth is exhausted or the classification failed.
        """
        if depth is None:
            depth = self.max_depth

        # Something in the chain vanished while we were following it
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
            target = self.adapter.resolve_link(path)
        except OSError as e:
            if is_broken_link(e):
                return path
            raise

        if target is None:
            return None
        return self.resolve(target, depth - 1)
