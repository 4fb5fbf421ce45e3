"""Testing utilities for findtree consumers."""

from .fixtures import InMemoryFileSystemAdapter

__all__ = ['InMemoryFileSystemAdapter']
