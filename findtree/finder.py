"""Finder: the whole findtree API bound to one filesystem adapter.

The package level functions (``findtree.file_sync`` and friends) belong
to a default Finder on the local filesystem. ``create_finder`` builds an
independent instance on another adapter, for tests or sandboxing.
"""

import os
from typing import Any, Callable, List, Optional, Union

from ._common.config import DEFAULT_LINK_DEPTH, TargetType
from ._common.error_handling import ErrorHandlingAdapter
from ._common.error_policies import ErrorHandler, ErrorPolicy, as_policy
from ._common.pattern import PatternLike
from .aio.api import EachJob, FindJob
from .aio.core.adapter import AsyncFileSystemAdapter
from .aio.core.resolver import AsyncSymlinkResolver
from .sync.adapters.filesystem import LocalFileSystemAdapter
from .sync.api import collect_entries
from .sync.core.adapter import FileSystemAdapter
from .sync.core.resolver import SymlinkResolver

PathLike = Union[str, os.PathLike]


class Finder:
    """Sync and async search functions sharing one adapter and error handler.

    Four call shapes per target type:

    - ``file_sync`` / ``dir_sync``: blocking, return a list;
    - ``file`` / ``dir``: scheduled, deliver a list to a callback;
    - ``eachfile`` / ``eachdir``: scheduled, push each match to an action;

    The instance level ``error_handler`` is only a default. Every call can
    override it with ``on_error=``, and scheduled jobs with ``.error()``;
    neither affects any other call.

    Example:
        >>> finder = create_finder()
        >>> finder.file_sync('/tmp/t', pattern='a.txt')
        ['/tmp/t/a.txt']
    """

    def __init__(self,
                 adapter: Union[FileSystemAdapter, AsyncFileSystemAdapter, None] = None,
                 error_handler: ErrorHandler = None,
                 max_link_depth: int = DEFAULT_LINK_DEPTH):
        """Initialize the finder.

        Args:
            adapter: Sync or async filesystem adapter (defaults to local)
            error_handler: Default error policy or ``fn(error)`` callable;
                None means errors are raised
            max_link_depth: Indirection bound for symbolic links
        """
        if adapter is None:
            adapter = LocalFileSystemAdapter()
        if isinstance(adapter, AsyncFileSystemAdapter):
            self.async_adapter = adapter
            self.adapter = adapter.base_adapter
        else:
            self.adapter = adapter
            self.async_adapter = AsyncFileSystemAdapter(adapter)
        self.error_handler = error_handler
        self.max_link_depth = max_link_depth

    def _policy(self, on_error: ErrorHandler = None) -> ErrorPolicy:
        return as_policy(on_error if on_error is not None else self.error_handler)

    def _guarded(self, adapter: Any) -> ErrorHandlingAdapter:
        return ErrorHandlingAdapter(adapter, self._policy())

    # Blocking, list returning

    def file_sync(self, root: PathLike, pattern: PatternLike = None,
                  on_error: ErrorHandler = None) -> List[str]:
        """Find files below ``root``; raises NotExistError if it is missing."""
        return collect_entries(root, TargetType.FILE, pattern, self.adapter,
                               self._policy(on_error), self.max_link_depth)

    def dir_sync(self, root: PathLike, pattern: PatternLike = None,
                 on_error: ErrorHandler = None) -> List[str]:
        """Find directories below ``root``; raises NotExistError if it is missing."""
        return collect_entries(root, TargetType.DIRECTORY, pattern, self.adapter,
                               self._policy(on_error), self.max_link_depth)

    # Scheduled, list delivering

    def file(self, root: PathLike, callback: Optional[Callable[[List[str]], Any]] = None,
             pattern: PatternLike = None, on_error: ErrorHandler = None) -> FindJob:
        """Schedule a file search; ``callback`` receives the list when done."""
        return FindJob(root, TargetType.FILE, callback, pattern=pattern,
                       adapter=self.async_adapter, on_error=self._policy(on_error),
                       max_link_depth=self.max_link_depth)

    def dir(self, root: PathLike, callback: Optional[Callable[[List[str]], Any]] = None,
            pattern: PatternLike = None, on_error: ErrorHandler = None) -> FindJob:
        """Schedule a directory search; ``callback`` receives the list when done."""
        return FindJob(root, TargetType.DIRECTORY, callback, pattern=pattern,
                       adapter=self.async_adapter, on_error=self._policy(on_error),
                       max_link_depth=self.max_link_depth)

    # Scheduled, per entry push

    def eachfile(self, root: PathLike, action: Optional[Callable[[str], Any]] = None,
                 pattern: PatternLike = None, on_error: ErrorHandler = None) -> EachJob:
        """Schedule a file search calling ``action`` for each match.

        Returns:
            EachJob; chain ``.end(fn)`` and ``.error(fn)`` on it
        """
        return EachJob(root, TargetType.FILE, action, pattern=pattern,
                       adapter=self.async_adapter, on_error=self._policy(on_error),
                       max_link_depth=self.max_link_depth)

    def eachdir(self, root: PathLike, action: Optional[Callable[[str], Any]] = None,
                pattern: PatternLike = None, on_error: ErrorHandler = None) -> EachJob:
        """Schedule a directory search calling ``action`` for each match."""
        return EachJob(root, TargetType.DIRECTORY, action, pattern=pattern,
                       adapter=self.async_adapter, on_error=self._policy(on_error),
                       max_link_depth=self.max_link_depth)

    # Probing helpers

    def exists(self, path: PathLike) -> bool:
        return self.adapter.exists(os.fspath(path))

    def is_file(self, path: PathLike) -> Optional[bool]:
        """lstat based; None if the check failed and the error was absorbed."""
        return self._guarded(self.adapter).is_file(os.fspath(path))

    def is_directory(self, path: PathLike) -> Optional[bool]:
        return self._guarded(self.adapter).is_directory(os.fspath(path))

    def is_symlink(self, path: PathLike) -> Optional[bool]:
        return self._guarded(self.adapter).is_symlink(os.fspath(path))

    def resolve_link_sync(self, path: PathLike) -> Optional[str]:
        """Resolve a link with the bounded resolver (None if unresolved)."""
        resolver = SymlinkResolver(self._guarded(self.adapter), self.max_link_depth)
        return resolver.resolve(os.fspath(path))

    async def resolve_link(self, path: PathLike) -> Optional[str]:
        """Async counterpart of ``resolve_link_sync``."""
        resolver = AsyncSymlinkResolver(self._guarded(self.async_adapter), self.max_link_depth)
        return await resolver.resolve(os.fspath(path))

    def __repr__(self) -> str:
        return f"Finder({self.adapter!r}, max_link_depth={self.max_link_depth})"


def create_finder(adapter: Union[FileSystemAdapter, AsyncFileSystemAdapter, None] = None,
                  error_handler: ErrorHandler = None,
                  max_link_depth: int = DEFAULT_LINK_DEPTH) -> Finder:
    """Create an independent Finder bound to ``adapter`` and ``error_handler``."""
    return Finder(adapter, error_handler, max_link_depth)
