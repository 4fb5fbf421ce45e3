"""Synchronous traversal engine.

Walks a directory tree depth-first with plain recursion and yields the
paths of the entries of the requested type. Filtering by pattern is the
collectors' job, not the engine's.
"""

import os
from typing import Iterator, Optional, Union

from ..._common.config import DEFAULT_LINK_DEPTH, TargetType
from ..._common.error_handling import ErrorHandlingAdapter
from ..._common.error_policies import ErrorPolicy, FailFastPolicy
from ..._common.errors import NotExistError
from .adapter import FileSystemAdapter
from .resolver import SymlinkResolver


class FindTraverser:
    """Depth-first, pre-order traversal of a directory tree.

    Directories are yielded before their contents. Symbolic links to
    directories are reported but never descended; together with the bounded
    resolver this keeps the walk finite in the presence of link cycles.

    A missing root (or a directory that disappears before it is descended)
    raises ``NotExistError`` immediately and aborts the whole walk. Every
    other filesystem failure goes through the error policy.
    """

    def __init__(self,
                 adapter: FileSystemAdapter,
                 policy: Optional[ErrorPolicy] = None,
                 max_link_depth: int = DEFAULT_LINK_DEPTH):
        """Initialize traverser.

        Args:
            adapter: Filesystem adapter to walk
            policy: Error policy for I/O failures (defaults to fail fast)
            max_link_depth: Indirection bound for symbolic links
        """
        self.policy = policy or FailFastPolicy()
        if not isinstance(adapter, ErrorHandlingAdapter):
            adapter = ErrorHandlingAdapter(adapter, self.policy)
        self.adapter = adapter
        self.resolver = SymlinkResolver(adapter, max_link_depth)

    def traverse(self, root: str, target: Union[TargetType, str] = TargetType.FILE) -> Iterator[str]:
        """Walk ``root`` and yield matching entry paths.

        Args:
            root: Directory to walk (a link to a directory is followed)
            target: Kind of entry to yield

        Yields:
            Paths joined onto ``root`` as given (not made absolute)

        Raises:
            NotExistError: If ``root`` does not exist
        """
        target = TargetType.parse(target)
        root = os.fspath(root)
        yield from self._walk(root, target)

    def _walk(self, root: str, target: TargetType) -> Iterator[str]:
        if not self.adapter.exists(root):
            raise NotExistError(root)

        listing_root = root
        is_link = self.adapter.is_symlink(root)
        if is_link is None:
            return
        if is_link:
            listing_root = self.resolver.resolve(root)
            if listing_root is None:
                return

        # Only directories have entries
        if not self.adapter.is_directory(listing_root):
            return

        for name in self.adapter.list_entries(listing_root):
            yield from self._visit(os.path.join(root, name), target)

    def _visit(self, path: str, target: TargetType) -> Iterator[str]:
        is_dir = self.adapter.is_directory(path)
        if is_dir is None:
            return
        if is_dir:
            if target is TargetType.DIRECTORY:
                yield path
            yield from self._walk(path, target)
            return

        is_link = self.adapter.is_symlink(path)
        if is_link is None:
            return
        if is_link:
            origin = self.resolver.resolve(path)
            if origin is not None and self.adapter.exists(origin):
                is_dir = self.adapter.is_directory(origin)
                if is_dir is None:
                    return
                if is_dir:
                    # Linked directory: reported, not descended
                    if target is TargetType.DIRECTORY:
                        yield path
                    return

        # Plain file, link to a file, or dangling/unresolved link
        if target is TargetType.FILE:
            yield path
