"""High-level async API for findtree.

This module provides simple, user-friendly async functions for finding
files and directories, plus the job handles behind the callback style
API of ``findtree.Finder``:

- ``FindJob`` walks the tree into a buffer and hands the (filtered)
  list to a completion callback;
- ``EachJob`` pushes every matching path to an action as soon as it is
  discovered, then signals the end of the traversal.

Jobs are scheduled as ``asyncio`` tasks, so they never start before the
caller regains control: an error handler installed on the returned
handle right away is in effect for the whole traversal. Jobs are
awaitable; awaiting one re-raises whatever stopped the traversal. A job
nobody awaits reports such a failure to the loop's exception handler.
"""

import asyncio
import inspect
import os
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Callable, List, Optional, Union

from .._common.config import DEFAULT_LINK_DEPTH, FindConfig, TargetType
from .._common.error_policies import ErrorHandler, ErrorPolicy, as_policy
from .._common.pattern import PatternLike
from .core.traverser import AsyncFindTraverser

PathLike = Union[str, os.PathLike]


def _build_config(target: Union[TargetType, str], pattern: PatternLike, max_link_depth: int) -> FindConfig:
    config = FindConfig(target=target, pattern=pattern, max_link_depth=max_link_depth)
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config


async def _invoke(fn: Callable, *args) -> Any:
    """Call a sync or async callback."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def iter_entries_async(
    root: PathLike,
    target: Union[TargetType, str] = TargetType.FILE,
    pattern: PatternLike = None,
    adapter: Optional[Any] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> AsyncIterator[str]:
    """Stream entries of one kind below ``root``.

    Args:
        root: Directory to walk
        target: 'file' or 'dir'
        pattern: Base name, compiled regex or predicate to filter with
        adapter: Sync or async filesystem adapter (defaults to local)
        on_error: Error policy or ``fn(error)`` callable
        max_link_depth: Indirection bound for symbolic links

    Yields:
        Matching paths in depth-first order

    Example:
        >>> async for path in iter_entries_async('/tmp/t', 'file'):
        ...     print(path)
    """
    config = _build_config(target, pattern, max_link_depth)
    traverser = AsyncFindTraverser(adapter, as_policy(on_error), config.max_link_depth)

    async for path in traverser.traverse(os.fspath(root), config.target):
        if config.matches(path):
            yield path


async def collect_entries_async(
    root: PathLike,
    target: Union[TargetType, str] = TargetType.FILE,
    pattern: PatternLike = None,
    adapter: Optional[Any] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Walk ``root`` into a buffer, then filter it by ``pattern``."""
    config = _build_config(target, pattern, max_link_depth)
    traverser = AsyncFindTraverser(adapter, as_policy(on_error), config.max_link_depth)

    buffer = []
    async for path in traverser.traverse(os.fspath(root), config.target):
        buffer.append(path)
    return config.filter(buffer)


async def find_files_async(
    root: PathLike,
    pattern: PatternLike = None,
    adapter: Optional[Any] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Find files below ``root``.

    Args:
        root: Root directory to search
        pattern: Exact base name (str) or regex searched in the full path
        adapter: Sync or async filesystem adapter (defaults to local)
        on_error: Error policy or ``fn(error)`` callable
        max_link_depth: Indirection bound for symbolic links

    Returns:
        List of matching file paths
    """
    return await collect_entries_async(root, TargetType.FILE, pattern, adapter, on_error, max_link_depth)


async def find_directories_async(
    root: PathLike,
    pattern: PatternLike = None,
    adapter: Optional[Any] = None,
    on_error: ErrorHandler = None,
    max_link_depth: int = DEFAULT_LINK_DEPTH
) -> List[str]:
    """Find directories below ``root``.

    Returns:
        List of matching directory paths
    """
    return await collect_entries_async(root, TargetType.DIRECTORY, pattern, adapter, on_error, max_link_depth)


def iter_files_async(root: PathLike, pattern: PatternLike = None, **kwargs) -> AsyncIterator[str]:
    """Streaming counterpart of ``find_files_async``."""
    return iter_entries_async(root, TargetType.FILE, pattern, **kwargs)


def iter_directories_async(root: PathLike, pattern: PatternLike = None, **kwargs) -> AsyncIterator[str]:
    """Streaming counterpart of ``find_directories_async``."""
    return iter_entries_async(root, TargetType.DIRECTORY, pattern, **kwargs)


class TraversalJob(ABC):
    """Base class for scheduled traversals.

    Subclasses implement ``_run``; its return value is the job's result.

    A job that fails while nobody awaits it reports the error to the event
    loop's exception handler as soon as it finishes.
    """

    def __init__(
        self,
        root: PathLike,
        target: Union[TargetType, str],
        pattern: PatternLike = None,
        adapter: Optional[Any] = None,
        on_error: ErrorHandler = None,
        max_link_depth: int = DEFAULT_LINK_DEPTH
    ):
        self.root = os.fspath(root)
        self.config = _build_config(target, pattern, max_link_depth)
        self._adapter = adapter
        self._policy = as_policy(on_error)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError(
                f"{self.__class__.__name__} must be started from a running event loop"
            ) from None
        self._awaited = False
        self._task = loop.create_task(self._run())
        self._task.add_done_callback(self._report_unobserved)

    @property
    def policy(self) -> ErrorPolicy:
        return self._policy

    @property
    def task(self) -> asyncio.Task:
        """The underlying task (for cancellation or done callbacks)."""
        return self._task

    def error(self, handler: ErrorHandler) -> 'TraversalJob':
        """Install the error handler for this job.

        Only effective before the job starts, i.e. before the caller
        yields control to the event loop. Non-callables are ignored.

        Returns:
            self, for chaining
        """
        if callable(handler):
            self._policy = as_policy(handler)
        return self

    def done(self) -> bool:
        return self._task.done()

    def _make_traverser(self) -> AsyncFindTraverser:
        return AsyncFindTraverser(self._adapter, self._policy, self.config.max_link_depth)

    @abstractmethod
    async def _run(self) -> Any:
        """Drive the traversal; the return value is the job's result."""
        pass

    def _report_unobserved(self, task: asyncio.Task) -> None:
        if self._awaited or task.cancelled():
            return
        error = task.exception()
        if error is None:
            return
        task.get_loop().call_exception_handler({
            'message': f"Unhandled error in {self!r}",
            'exception': error,
            'task': task,
        })

    def __await__(self):
        self._awaited = True
        return self._task.__await__()

    def __repr__(self) -> str:
        state = 'done' if self._task.done() else 'pending'
        return f"{self.__class__.__name__}(root={self.root!r}, target={self.config.target.value}, {state})"


class FindJob(TraversalJob):
    """Collects every match, then delivers the whole list at once."""

    def __init__(self, root: PathLike, target: Union[TargetType, str],
                 callback: Optional[Callable[[List[str]], Any]] = None, **kwargs):
        self._callback = callback
        super().__init__(root, target, **kwargs)

    async def _run(self) -> List[str]:
        buffer = []
        async for path in self._make_traverser().traverse(self.root, self.config.target):
            buffer.append(path)

        result = self.config.filter(buffer)
        if callable(self._callback):
            await _invoke(self._callback, result)
        return result


class EachJob(TraversalJob):
    """Pushes each match to an action as it is discovered.

    The end callback runs exactly once, after the last action. Awaiting
    the job returns the number of matches pushed.
    """

    def __init__(self, root: PathLike, target: Union[TargetType, str],
                 action: Optional[Callable[[str], Any]] = None, **kwargs):
        self._action = action
        self._on_end: Optional[Callable[[], Any]] = None
        super().__init__(root, target, **kwargs)

    def end(self, callback: Callable[[], Any]) -> 'EachJob':
        """Register the end-of-traversal callback (default: no-op).

        Returns:
            self, for chaining
        """
        if callable(callback):
            self._on_end = callback
        return self

    async def _run(self) -> int:
        count = 0
        async for path in self._make_traverser().traverse(self.root, self.config.target):
            if not self.config.matches(path):
                continue
            count += 1
            if callable(self._action):
                await _invoke(self._action, path)

        if self._on_end is not None:
            await _invoke(self._on_end)
        return count
