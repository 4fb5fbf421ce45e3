"""Core abstractions for async traversal.

All I/O goes through AsyncFileSystemAdapter; the traverser streams
results as an AsyncIterator.
"""

from .adapter import AsyncFileSystemAdapter
from .resolver import AsyncSymlinkResolver
from .traverser import AsyncFindTraverser

__all__ = [
    'AsyncFileSystemAdapter',
    'AsyncSymlinkResolver',
    'AsyncFindTraverser',
]
