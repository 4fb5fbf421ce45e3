"""High-level synchronous API for findtree.

This module provides simple, functional interfaces for the common
cases: collect every file (or directory) below a root into a list, or
iterate over them lazily.
"""

import os
from typing import Iterator, List, Optional, Union

from .._common.config import DEFAULT_LINK_DEPTH, FindConfig, TargetType
from .._common.error_policies import ErrorHandler, as_policy
from .._common.pattern import PatternLike
from .adapters.filesystem import LocalFileSystemAdapter
from .core.adapter import FileSystemAdapter
from .core.traverser import FindTraverser

PathLike = Union[str, os.PathLike]


def _make_traverser(adapter: Optional[FileSystemAdapter],
                    on_error: ErrorHandler,
                    max_link_depth: int) -> FindTraverser:
    return FindTraverser(
        adapter or LocalFileSystemAdapter(),
        policy=as_policy(on_error),
        max_link_depth=max_link_depth,
    )


def _build_config(target: TargetType, pattern: PatternLike, max_link_depth: int) -> FindConfig:
    config = FindConfig(target=target, pattern=pattern, max_link_depth=max_link_depth)
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config


def iter_entries(
    root: PathLike,
    target: Union[TargetType, str] = TargetType.FILE,
    pattern: PatternLike = None,
    adapter: Optional[FileSystemAdapter] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> Iterator[str]:
    """Lazily walk ``root`` yielding entries of one kind.

    Args:
        root: Directory to walk
        target: 'file' or 'dir'
        pattern: Base name, compiled regex or predicate to filter with
        adapter: Filesystem adapter (defaults to the local filesystem)
        on_error: Error policy or ``fn(error)`` callable for I/O failures
        max_link_depth: Indirection bound for symbolic links

    Yields:
        Matching paths in depth-first order

    Raises:
        NotExistError: If ``root`` does not exist
    """
    config = _build_config(target, pattern, max_link_depth)
    traverser = _make_traverser(adapter, on_error, config.max_link_depth)

    for path in traverser.traverse(os.fspath(root), config.target):
        if config.matches(path):
            yield path


def collect_entries(
    root: PathLike,
    target: Union[TargetType, str] = TargetType.FILE,
    pattern: PatternLike = None,
    adapter: Optional[FileSystemAdapter] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Walk ``root`` to completion and return entries of one kind.

    The whole tree is walked into a buffer first; the pattern is applied
    to the buffer afterwards.

    Returns:
        List of matching paths in depth-first order
    """
    config = _build_config(target, pattern, max_link_depth)
    traverser = _make_traverser(adapter, on_error, config.max_link_depth)

    buffer = list(traverser.traverse(os.fspath(root), config.target))
    return config.filter(buffer)


def find_files(
    root: PathLike,
    pattern: PatternLike = None,
    adapter: Optional[FileSystemAdapter] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Find files below ``root``.

    Args:
        root: Directory to search
        pattern: Exact base name (str) or regex searched in the full path
        adapter: Filesystem adapter (defaults to the local filesystem)
        on_error: Error policy or ``fn(error)`` callable for I/O failures
        max_link_depth: Indirection bound for symbolic links

    Returns:
        List of file paths

    Example:
        >>> find_files('/tmp/t', re.compile(r'\\.txt$'))
        ['/tmp/t/a.txt', '/tmp/t/sub/b.txt']
    """
    return collect_entries(root, TargetType.FILE, pattern, adapter, on_error, max_link_depth)


def find_directories(
    root: PathLike,
    pattern: PatternLike = None,
    adapter: Optional[FileSystemAdapter] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Find directories below ``root`` (the root itself is not included)."""
    return collect_entries(root, TargetType.DIRECTORY, pattern, adapter, on_error, max_link_depth)


def iter_files(root: PathLike, pattern: PatternLike = None, **kwargs) -> Iterator[str]:
    """Lazy counterpart of ``find_files``."""
    return iter_entries(root, TargetType.FILE, pattern, **kwargs)


def iter_directories(root: PathLike, pattern: PatternLike = None, **kwargs) -> Iterator[str]:
    """Lazy counterpart of ``find_directories``."""
    return iter_entries(root, TargetType.DIRECTORY, pattern, **kwargs)
