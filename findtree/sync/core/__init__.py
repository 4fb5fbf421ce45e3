"""Core abstractions for synchronous traversal."""

from .adapter import FileSystemAdapter
from .resolver import SymlinkResolver
from .traverser import FindTraverser

__all__ = [
    'FileSystemAdapter',
    'SymlinkResolver',
    'FindTraverser',
]
