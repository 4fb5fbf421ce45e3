"""Synchronous implementation of findtree.

All components here operate in a blocking manner: a call walks the
whole tree before it returns.
"""

# Core components
from .core.adapter import FileSystemAdapter
from .core.resolver import SymlinkResolver
from .core.traverser import FindTraverser

# Adapters
from .adapters.filesystem import LocalFileSystemAdapter

# High-level API
from .api import (
    collect_entries,
    find_directories,
    find_files,
    iter_directories,
    iter_entries,
    iter_files,
)

__all__ = [
    # Core
    'FileSystemAdapter',
    'SymlinkResolver',
    'FindTraverser',
    # Adapters
    'LocalFileSystemAdapter',
    # API
    'collect_entries',
    'find_directories',
    'find_files',
    'iter_directories',
    'iter_entries',
    'iter_files',
]
