"""Filesystem adapters for synchronous traversal."""

from .filesystem import LocalFileSystemAdapter

__all__ = [
    'LocalFileSystemAdapter',
]
